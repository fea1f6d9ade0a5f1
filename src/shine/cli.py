"""
Shine CLI

Command-line client for the shine employee recognition contract.

Actions are built locally, encoded by nodeos (abi_json_to_bin), signed by
keosd and pushed back to nodeos. Settings come from flags, SHINE_*
environment variables, or ~/.shine/.env.

Commands:
  handle    - Run a chat command (/recognize, /upvote, /register, /unregister)
  praise    - Submit addpraise
  vote      - Submit addvote
  post      - Submit a post between accounts
  bind      - Bind a member to an account
  unbind    - Remove a member binding
  reset     - Reset round state
  clear     - Clear contract tables
  scenario  - Replay the demo command sequence
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from .commands.base import ShineContext
from .config import ShineConfig
from .errors import ConfigError


# ============ Constants ============

VERSION = "0.1.0"


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="shine")
@click.option("--account-name", default=None, help="Account authorizing actions [SHINE_ACCOUNT]")
@click.option("--contract", default=None, help="Contract account [SHINE_CONTRACT]")
@click.option("--private-key", default=None, help="Key imported into the wallet before signing [SHINE_PRIVATE_KEY]")
@click.option("--api-addr", "--url", "api_url", default=None, help="nodeos HTTP endpoint [SHINE_API_URL]")
@click.option("--wallet-url", default=None, help="keosd HTTP endpoint [SHINE_WALLET_URL]")
@click.option("--wallet-name", default=None, help="keosd wallet name [SHINE_WALLET_NAME]")
@click.option("--retries", type=int, default=None, help="Attempts on network failure [SHINE_RETRIES]")
@click.option("--dry-run", is_flag=True, help="Print actions instead of submitting them")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    account_name: Optional[str],
    contract: Optional[str],
    private_key: Optional[str],
    api_url: Optional[str],
    wallet_url: Optional[str],
    wallet_name: Optional[str],
    retries: Optional[int],
    dry_run: bool,
    verbose: bool,
) -> None:
    """Shine - employee recognition on EOSIO."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    try:
        config = ShineConfig.from_env(
            account=account_name,
            contract=contract,
            private_key=private_key,
            api_url=api_url,
            wallet_url=wallet_url,
            wallet_name=wallet_name,
            retries=retries,
        )
    except ConfigError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)

    ctx.obj = ShineContext(config=config, dry_run=dry_run)


# ============ Commands ============

from .commands.handle import handle
from .commands.records import bind, clear, post, praise, reset, unbind, vote
from .commands.scenario import scenario

cli.add_command(handle)
cli.add_command(praise)
cli.add_command(vote)
cli.add_command(post)
cli.add_command(bind)
cli.add_command(unbind)
cli.add_command(reset)
cli.add_command(clear)
cli.add_command(scenario)


# ============ Entry Points ============


def main() -> None:
    """Shine CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
