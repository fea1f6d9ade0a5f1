"""
Action records for the shine contract.

Each record maps one-to-one onto a contract action. Records are plain,
frozen dataclasses; ``Action`` wraps one of them together with the target
contract account and the authorization list, which is the shape the node
expects in a transaction.

Digest fields hold raw 32-byte SHA-256 values and are rendered as
lowercase hex by ``to_dict()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from .errors import InvalidAccountNameError
from .utils import is_account_name

ACTIVE = "active"


def _check_account(value: str, field_name: str) -> None:
    if not is_account_name(value):
        raise InvalidAccountNameError(f"Invalid account name for {field_name}: {value!r}")


def _check_digest(value: bytes, field_name: str) -> None:
    if not isinstance(value, bytes) or len(value) != 32:
        raise ValueError(f"{field_name} must be a 32-byte digest")


@dataclass(frozen=True)
class PermissionLevel:
    actor: str
    permission: str = ACTIVE

    def __post_init__(self) -> None:
        _check_account(self.actor, "actor")

    def to_dict(self) -> dict[str, str]:
        return {"actor": self.actor, "permission": self.permission}


@dataclass(frozen=True)
class Praise:
    action_name: ClassVar[str] = "addpraise"

    post: bytes
    author: bytes
    praisee: bytes
    memo: str = ""

    def __post_init__(self) -> None:
        for name in ("post", "author", "praisee"):
            _check_digest(getattr(self, name), name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "post": self.post.hex(),
            "author": self.author.hex(),
            "praisee": self.praisee.hex(),
            "memo": self.memo,
        }


@dataclass(frozen=True)
class Vote:
    action_name: ClassVar[str] = "addvote"

    post: bytes
    voter: bytes

    def __post_init__(self) -> None:
        _check_digest(self.post, "post")
        _check_digest(self.voter, "voter")

    def to_dict(self) -> dict[str, Any]:
        return {"post": self.post.hex(), "voter": self.voter.hex()}


@dataclass(frozen=True)
class MemberBinding:
    action_name: ClassVar[str] = "bindmember"

    member: bytes
    account: str

    def __post_init__(self) -> None:
        _check_digest(self.member, "member")
        _check_account(self.account, "account")

    def to_dict(self) -> dict[str, Any]:
        return {"member": self.member.hex(), "account": self.account}


@dataclass(frozen=True)
class MemberUnbinding:
    action_name: ClassVar[str] = "unbindmember"

    member: bytes

    def __post_init__(self) -> None:
        _check_digest(self.member, "member")

    def to_dict(self) -> dict[str, Any]:
        return {"member": self.member.hex()}


@dataclass(frozen=True)
class Post:
    action_name: ClassVar[str] = "post"

    sender: str
    recipient: str
    memo: str = ""

    def __post_init__(self) -> None:
        _check_account(self.sender, "from")
        _check_account(self.recipient, "to")

    def to_dict(self) -> dict[str, Any]:
        return {"from": self.sender, "to": self.recipient, "memo": self.memo}


@dataclass(frozen=True)
class Reset:
    action_name: ClassVar[str] = "reset"

    any: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"any": self.any}


@dataclass(frozen=True)
class Clear:
    action_name: ClassVar[str] = "clear"

    any: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"any": self.any}


Record = Union[Praise, Vote, MemberBinding, MemberUnbinding, Post, Reset, Clear]


@dataclass(frozen=True)
class Action:
    """A record addressed to a contract, with its authorization list."""

    account: str
    data: Record
    authorization: tuple[PermissionLevel, ...]

    def __post_init__(self) -> None:
        _check_account(self.account, "contract")
        if not self.authorization:
            raise ValueError("Action requires at least one authorization")

    @property
    def name(self) -> str:
        return self.data.action_name

    def to_dict(self) -> dict[str, Any]:
        return {
            "account": self.account,
            "name": self.name,
            "authorization": [p.to_dict() for p in self.authorization],
            "data": self.data.to_dict(),
        }


__all__ = [
    "ACTIVE",
    "Action",
    "Clear",
    "MemberBinding",
    "MemberUnbinding",
    "PermissionLevel",
    "Post",
    "Praise",
    "Record",
    "Reset",
    "Vote",
]
