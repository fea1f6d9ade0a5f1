"""
Handle - run a chat-style command the way a bot would receive it.

    shine handle --from user.1 --context post.1 /recognize user.2 great demo
    shine handle --from user.1 --context post.1 "/recognize user.2 great demo"
"""

from __future__ import annotations

import click

from ..errors import ShineError
from ..translator import CommandHandler, CommandTranslator
from .base import ShineContext, echo_json, fail, pass_shine


@click.command(context_settings={"ignore_unknown_options": True})
@click.option("--from", "sender", required=True, help="User issuing the command")
@click.option("--context", "context", required=True, help="Post / message id, or email for /register")
@click.argument("command", nargs=-1, required=True)
@pass_shine
def handle(shine: ShineContext, sender: str, context: str, command: tuple[str, ...]) -> None:
    """Translate COMMAND and submit the resulting action."""
    handler = CommandHandler(CommandTranslator(shine.config), shine.submitter())
    try:
        response = handler.handle(sender, context, " ".join(command))
    except ShineError as exc:
        fail(exc)
    echo_json(response)
