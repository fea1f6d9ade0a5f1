"""Shared plumbing for subcommands: context object, submitter, reporting."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import NoReturn

import click

from ..actions import Action
from ..chain import DryRunSubmitter, NodeSubmitter, RetryingSubmitter, Submitter
from ..config import ShineConfig
from ..errors import ShineError


@dataclass
class ShineContext:
    config: ShineConfig
    dry_run: bool = False

    def submitter(self) -> Submitter:
        if self.dry_run:
            return DryRunSubmitter()
        return RetryingSubmitter(NodeSubmitter(self.config), attempts=self.config.retries)


pass_shine = click.make_pass_decorator(ShineContext)


def fail(exc: Exception) -> NoReturn:
    click.secho(f"ERROR: {exc}", fg="red", err=True)
    sys.exit(getattr(exc, "exit_code", 1))


def echo_json(payload: object) -> None:
    click.echo(json.dumps(payload, indent=2, sort_keys=True))


def submit_action(shine: ShineContext, action: Action) -> dict:
    """Submit one action, print the response, exit non-zero on failure."""
    try:
        response = shine.submitter().submit(action)
    except ShineError as exc:
        fail(exc)
    echo_json(response)
    return response
