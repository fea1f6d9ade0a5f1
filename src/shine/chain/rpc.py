"""
HTTP client for the nodeos chain API and the keosd wallet API.

Both daemons take a JSON body via POST and answer with JSON. Errors come
back as a non-2xx status with an ``error`` object describing the failure.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..errors import ChainRpcError, SubmissionError

logger = logging.getLogger(__name__)


def _error_message(body: Any) -> str:
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            details = error.get("details") or []
            detail = details[0].get("message") if details and isinstance(details[0], dict) else None
            return detail or error.get("what") or body.get("message") or str(error)
        if body.get("message"):
            return str(body["message"])
    return str(body)


class RpcClient:
    """
    Minimal JSON POST client bound to one base URL.

    Args:
        base_url: e.g. http://localhost:8888
        timeout: Per-request timeout in seconds
        client: Pre-built httpx.Client (tests pass one with a MockTransport)
    """

    def __init__(self, base_url: str, timeout: float = 30.0, client: Optional[httpx.Client] = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    def post(self, path: str, payload: Any = None) -> Any:
        """
        POST a JSON payload and return the decoded response.

        Raises:
            ChainRpcError: The daemon answered with an error status
            SubmissionError: The request never completed (chained from httpx)
        """
        url = f"{self.base_url}{path}"
        logger.debug("POST %s", url)
        try:
            if self._client is not None:
                response = self._client.post(url, json=payload, timeout=self.timeout)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = client.post(url, json=payload)
        except httpx.TransportError as exc:
            raise SubmissionError(f"Request to {url} failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = response.text

        if response.is_error:
            raise ChainRpcError(
                f"{path} returned {response.status_code}: {_error_message(body)}",
                status_code=response.status_code,
                body=body,
            )
        return body


class ChainApi(RpcClient):
    """nodeos /v1/chain endpoints."""

    def get_info(self) -> dict:
        return self.post("/v1/chain/get_info")

    def abi_json_to_bin(self, code: str, action: str, args: dict) -> str:
        result = self.post("/v1/chain/abi_json_to_bin", {"code": code, "action": action, "args": args})
        return result["binargs"]

    def get_required_keys(self, transaction: dict, available_keys: list[str]) -> list[str]:
        result = self.post(
            "/v1/chain/get_required_keys",
            {"transaction": transaction, "available_keys": available_keys},
        )
        return result["required_keys"]

    def push_transaction(self, signed: dict) -> dict:
        return self.post(
            "/v1/chain/push_transaction",
            {
                "signatures": signed.get("signatures", []),
                "compression": "none",
                "packed_context_free_data": "",
                "transaction": {k: v for k, v in signed.items() if k not in ("signatures", "context_free_data")},
            },
        )


class WalletApi(RpcClient):
    """keosd /v1/wallet endpoints."""

    def import_key(self, wallet_name: str, private_key: str) -> None:
        try:
            self.post("/v1/wallet/import_key", [wallet_name, private_key])
        except ChainRpcError as exc:
            if "already" not in str(exc).lower():
                raise
            logger.debug("Key already present in wallet %s", wallet_name)

    def get_public_keys(self) -> list[str]:
        return self.post("/v1/wallet/get_public_keys")

    def sign_transaction(self, transaction: dict, public_keys: list[str], chain_id: str) -> dict:
        return self.post("/v1/wallet/sign_transaction", [transaction, public_keys, chain_id])
