"""
Chain - hand-off layer between action records and an EOSIO node.

Provides thin HTTP wrappers for the nodeos chain API and the keosd wallet
API, plus the submitters that push a signed transaction.

ABI encoding and signing stay with the node and the wallet; this package
only moves JSON between them.
"""

from .submit import DryRunSubmitter, NodeSubmitter, RetryingSubmitter, Submitter

__all__ = ["DryRunSubmitter", "NodeSubmitter", "RetryingSubmitter", "Submitter"]
