"""
Scenario - replay a fixed set of chat commands against the contract.

Useful to seed a fresh local chain. Commands run in order; the first
failure stops the run.
"""

from __future__ import annotations

import click

from ..errors import ShineError
from ..translator import CommandTranslator
from .base import ShineContext, echo_json, fail, pass_shine

# (sender, context, command)
SCENARIO = [
    ("matt", "post.0", "/recognize eve for the release notes"),
    ("matt", "post.1", "/recognize eve for fixing the build"),
    ("evan", "post.2", "/recognize eve for the review"),
    ("eve", "post.3", "/recognize matt for pairing on the parser"),
    ("mike", "post.4", "/recognize matt for the demo"),
    ("mike", "post.5", "/recognize eve for the docs"),
    ("mike", "post.6", "/recognize evan for on-call"),
    ("evan", "post.0", "/upvote"),
    ("evan", "post.1", "/upvote"),
    ("mike", "post.1", "/upvote"),
    ("mike", "post.3", "/upvote"),
    ("evan", "post.3", "/upvote"),
    ("eve", "post.4", "/upvote"),
    ("matt", "post.5", "/upvote"),
    ("matt", "post.6", "/upvote"),
    ("eve", "post.6", "/upvote"),
    ("matt", "matt@example.com", "/register matt"),
    ("eve", "eve@example.com", "/register eve"),
]


@click.command()
@pass_shine
def scenario(shine: ShineContext) -> None:
    """Submit the demo sequence of praises, votes and registrations."""
    try:
        actions = CommandTranslator(shine.config).translate_many(SCENARIO)
        submitter = shine.submitter()
        for (sender, context, text), action in zip(SCENARIO, actions):
            click.echo(f"{sender} @ {context}: {text}")
            echo_json(submitter.submit(action))
    except ShineError as exc:
        fail(exc)
    click.secho(f"Submitted {len(actions)} actions.", fg="green")
