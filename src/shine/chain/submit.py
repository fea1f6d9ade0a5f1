"""
Submitters - push actions to the chain.

A submitter takes one ``Action`` and returns the node's response, or
raises ``SubmissionError``. ``NodeSubmitter`` does the real work over
HTTP; ``RetryingSubmitter`` and ``DryRunSubmitter`` wrap or replace it.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional, Protocol

import httpx

from ..actions import Action
from ..config import ShineConfig
from ..errors import SubmissionError
from ..utils import expiration_after, ref_block_prefix
from .rpc import ChainApi, WalletApi

logger = logging.getLogger(__name__)

TX_EXPIRATION_SECONDS = 30

# The request never reached the server.
NOT_SENT_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout)


class Submitter(Protocol):
    def submit(self, action: Action) -> dict:
        ...


class NodeSubmitter:
    """
    Sign through keosd and push through nodeos.

    Flow:
    1. nodeos abi_json_to_bin encodes the action data
    2. nodeos get_info supplies the chain id and TaPoS reference block
    3. keosd signs with the keys nodeos reports as required
    4. nodeos push_transaction
    """

    def __init__(self, config: ShineConfig, client: Optional[httpx.Client] = None) -> None:
        self.config = config
        self.chain = ChainApi(config.api_url, timeout=config.timeout, client=client)
        self.wallet = WalletApi(config.wallet_url, timeout=config.timeout, client=client)

    def build_transaction(self, action: Action, info: dict) -> dict:
        payload = action.to_dict()
        payload["data"] = self.chain.abi_json_to_bin(action.account, action.name, payload["data"])
        return {
            "expiration": expiration_after(TX_EXPIRATION_SECONDS),
            "ref_block_num": int(info["head_block_num"]) & 0xFFFF,
            "ref_block_prefix": ref_block_prefix(info["head_block_id"]),
            "max_net_usage_words": 0,
            "max_cpu_usage_ms": 0,
            "delay_sec": 0,
            "context_free_actions": [],
            "actions": [payload],
            "transaction_extensions": [],
        }

    def sign(self, transaction: dict, chain_id: str) -> dict:
        if self.config.private_key:
            self.wallet.import_key(self.config.wallet_name, self.config.private_key)
        available = self.wallet.get_public_keys()
        required = self.chain.get_required_keys(transaction, available)
        return self.wallet.sign_transaction(transaction, required, chain_id)

    def submit(self, action: Action) -> dict:
        logger.debug("Submitting %s to %s", action.name, action.account)
        info = self.chain.get_info()
        transaction = self.build_transaction(action, info)
        signed = self.sign(transaction, info["chain_id"])
        response = self.chain.push_transaction(signed)
        logger.debug("Pushed %s: %s", action.name, response.get("transaction_id"))
        return response


class RetryingSubmitter:
    """
    Retry connection failures a bounded number of times.

    Only errors caused by a connection that was never established are
    retried. Read timeouts and protocol errors may arrive after nodeos
    accepted the push, and rejections (``ChainRpcError``) are final, so
    both are raised immediately.
    """

    def __init__(self, inner: Submitter, attempts: int = 3, delay: float = 1.0) -> None:
        if attempts < 1:
            raise ValueError("attempts must be at least 1")
        self.inner = inner
        self.attempts = attempts
        self.delay = delay

    def submit(self, action: Action) -> dict:
        for attempt in range(1, self.attempts + 1):
            try:
                return self.inner.submit(action)
            except SubmissionError as exc:
                if not isinstance(exc.__cause__, NOT_SENT_ERRORS) or attempt == self.attempts:
                    raise
                logger.warning(
                    "Submission of %s failed (attempt %d/%d): %s",
                    action.name, attempt, self.attempts, exc,
                )
                time.sleep(self.delay)
        raise AssertionError("unreachable")


class DryRunSubmitter:
    """Return the action as JSON instead of sending it."""

    def submit(self, action: Action) -> dict[str, Any]:
        return {"dry_run": True, "action": action.to_dict()}
