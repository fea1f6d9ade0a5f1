"""
Direct action commands.

Each command builds one record from flags and submits it. Identifiers
(--author, --post, --voter, --member, ...) are plain strings; they are
hashed before submission.
"""

from __future__ import annotations

from typing import Optional

import click

from ..errors import ShineError
from ..translator import (
    build_bind_member,
    build_clear,
    build_post,
    build_praise,
    build_reset,
    build_unbind_member,
    build_vote,
)
from .base import ShineContext, fail, pass_shine, submit_action


@click.command()
@click.option("--author", required=True, help="Who gives the praise")
@click.option("--post", required=True, help="Post / message the praise refers to")
@click.option("--praisee", required=True, help="Who receives the praise")
@click.option("--memo", default="", help="Free text memo")
@pass_shine
def praise(shine: ShineContext, author: str, post: str, praisee: str, memo: str) -> None:
    """Submit an addpraise action."""
    submit_action(shine, build_praise(shine.config, post=post, author=author, praisee=praisee, memo=memo))


@click.command()
@click.option("--voter", required=True, help="Who votes")
@click.option("--post", "--post_id", "-p", "post", required=True, help="Post being voted for")
@pass_shine
def vote(shine: ShineContext, voter: str, post: str) -> None:
    """Vote for a post."""
    submit_action(shine, build_vote(shine.config, post=post, voter=voter))


@click.command()
@click.option("--to", "recipient", required=True, help="Receiving account")
@click.option("--memo", required=True, help="Message")
@click.option("--from", "sender", default=None, help="Sending account (default: --account-name)")
@pass_shine
def post(shine: ShineContext, recipient: str, memo: str, sender: Optional[str]) -> None:
    """Submit a new post to the rewards system."""
    try:
        action = build_post(shine.config, sender=sender or shine.config.account, recipient=recipient, memo=memo)
    except ShineError as exc:
        fail(exc)
    submit_action(shine, action)


@click.command()
@click.option("--member", required=True, help="Member identity (e.g. email)")
@click.option("--account", required=True, help="Account to bind to")
@pass_shine
def bind(shine: ShineContext, member: str, account: str) -> None:
    """Bind a member identity to an account."""
    try:
        action = build_bind_member(shine.config, member=member, account=account)
    except ShineError as exc:
        fail(exc)
    submit_action(shine, action)


@click.command()
@click.option("--member", required=True, help="Member identity (e.g. email)")
@pass_shine
def unbind(shine: ShineContext, member: str) -> None:
    """Remove a member binding."""
    submit_action(shine, build_unbind_member(shine.config, member=member))


@click.command()
@pass_shine
def reset(shine: ShineContext) -> None:
    """Reset the contract's round state."""
    submit_action(shine, build_reset(shine.config))


@click.command()
@pass_shine
def clear(shine: ShineContext) -> None:
    """Clear all contract tables."""
    submit_action(shine, build_clear(shine.config))
