"""
Command Translator - turn chat-style commands into contract actions.

A command is a keyword plus string arguments, issued by a sender within a
context (the post or message the command refers to, or the sender's
identity for registration):

    /recognize <praisee> [memo...]  ->  addpraise
    /upvote                         ->  addvote
    /register <account>             ->  bindmember
    /unregister                     ->  unbindmember

The leading slash is optional. Human readable identifiers are hashed
with ``digest`` before they reach a record.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Sequence

from .actions import (
    Action,
    Clear,
    MemberBinding,
    MemberUnbinding,
    PermissionLevel,
    Post,
    Praise,
    Record,
    Reset,
    Vote,
)
from .config import ShineConfig
from .errors import InvalidArgumentsError, UnrecognizedCommandError
from .utils import digest

logger = logging.getLogger(__name__)


def _wrap(config: ShineConfig, record: Record, actor: Optional[str] = None) -> Action:
    return Action(
        account=config.contract,
        data=record,
        authorization=(PermissionLevel(actor or config.account),),
    )


# ============ Direct builders ============


def build_praise(config: ShineConfig, post: str, author: str, praisee: str, memo: str = "") -> Action:
    return _wrap(config, Praise(post=digest(post), author=digest(author), praisee=digest(praisee), memo=memo))


def build_vote(config: ShineConfig, post: str, voter: str) -> Action:
    return _wrap(config, Vote(post=digest(post), voter=digest(voter)))


def build_bind_member(config: ShineConfig, member: str, account: str) -> Action:
    return _wrap(config, MemberBinding(member=digest(member), account=account))


def build_unbind_member(config: ShineConfig, member: str) -> Action:
    return _wrap(config, MemberUnbinding(member=digest(member)))


def build_post(config: ShineConfig, sender: str, recipient: str, memo: str) -> Action:
    """Posts are authorized by the sending account, not the configured one."""
    return _wrap(config, Post(sender=sender, recipient=recipient, memo=memo), actor=sender)


def build_reset(config: ShineConfig) -> Action:
    return _wrap(config, Reset())


def build_clear(config: ShineConfig) -> Action:
    return _wrap(config, Clear())


# ============ Translator ============


class CommandTranslator:
    """Stateless mapping from (keyword, args) to exactly one Action."""

    def __init__(self, config: ShineConfig) -> None:
        self.config = config
        self._handlers: dict[str, Callable[[Sequence[str], str, str], Action]] = {
            "recognize": self._recognize,
            "upvote": self._upvote,
            "register": self._register,
            "unregister": self._unregister,
        }

    @property
    def keywords(self) -> list[str]:
        return sorted(self._handlers)

    def translate(self, keyword: str, args: Sequence[str], *, sender: str, context: str) -> Action:
        """
        Translate a keyword and its arguments.

        Args:
            keyword: Command keyword, with or without a leading '/'
            args: Positional arguments following the keyword
            sender: Who issued the command
            context: Post / message id, or member identity for registration

        Returns:
            The constructed Action

        Raises:
            UnrecognizedCommandError: Unknown keyword
            InvalidArgumentsError: Missing required arguments
        """
        handler = self._handlers.get(keyword[1:] if keyword.startswith("/") else keyword)
        if handler is None:
            raise UnrecognizedCommandError(f"unknown command [{keyword}]")
        action = handler(list(args), sender, context)
        logger.debug("Translated %s from %s into %s", keyword, sender, action.name)
        return action

    def parse(self, sender: str, context: str, text: str) -> Action:
        parts = text.split()
        if not parts:
            raise UnrecognizedCommandError(f"Command not clear [{text}]")
        return self.translate(parts[0], parts[1:], sender=sender, context=context)

    def translate_many(self, commands: Iterable[tuple[str, str, str]]) -> list[Action]:
        return [self.parse(sender, context, text) for sender, context, text in commands]

    # ---- keyword handlers ----

    @staticmethod
    def _require(args: Sequence[str], count: int, usage: str) -> None:
        if len(args) < count:
            raise InvalidArgumentsError(f"invalid arguments, usage: {usage}")

    def _recognize(self, args: Sequence[str], sender: str, context: str) -> Action:
        self._require(args, 1, "/recognize <praisee> [memo...]")
        return build_praise(self.config, post=context, author=sender, praisee=args[0], memo=" ".join(args[1:]))

    def _upvote(self, args: Sequence[str], sender: str, context: str) -> Action:
        return build_vote(self.config, post=context, voter=sender)

    def _register(self, args: Sequence[str], sender: str, context: str) -> Action:
        self._require(args, 1, "/register <account>")
        return build_bind_member(self.config, member=context, account=args[0])

    def _unregister(self, args: Sequence[str], sender: str, context: str) -> Action:
        return build_unbind_member(self.config, member=context)


class CommandHandler:
    """Translate a command and hand the action to a submitter."""

    def __init__(self, translator: CommandTranslator, submitter) -> None:
        self.translator = translator
        self.submitter = submitter

    def handle(self, sender: str, context: str, text: str) -> dict:
        action = self.translator.parse(sender, context, text)
        return self.submitter.submit(action)
