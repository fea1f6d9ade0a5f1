__all__ = [
    # Records
    "Action",
    "PermissionLevel",
    "Praise",
    "Vote",
    "MemberBinding",
    "MemberUnbinding",
    "Post",
    "Reset",
    "Clear",
    # Translator
    "CommandTranslator",
    "CommandHandler",
    "build_praise",
    "build_vote",
    "build_bind_member",
    "build_unbind_member",
    "build_post",
    "build_reset",
    "build_clear",
    # Submission
    "Submitter",
    "NodeSubmitter",
    "RetryingSubmitter",
    "DryRunSubmitter",
    # Config
    "ShineConfig",
    # Errors
    "ShineError",
    "CommandError",
    "UnrecognizedCommandError",
    "InvalidArgumentsError",
    "InvalidAccountNameError",
    "ConfigError",
    "SubmissionError",
    "ChainRpcError",
    # Hashing
    "digest",
    "digest_hex",
]

from .actions import (
    Action,
    Clear,
    MemberBinding,
    MemberUnbinding,
    PermissionLevel,
    Post,
    Praise,
    Reset,
    Vote,
)
from .chain import DryRunSubmitter, NodeSubmitter, RetryingSubmitter, Submitter
from .config import ShineConfig
from .errors import (
    ChainRpcError,
    CommandError,
    ConfigError,
    InvalidAccountNameError,
    InvalidArgumentsError,
    ShineError,
    SubmissionError,
    UnrecognizedCommandError,
)
from .translator import (
    CommandHandler,
    CommandTranslator,
    build_bind_member,
    build_clear,
    build_post,
    build_praise,
    build_reset,
    build_unbind_member,
    build_vote,
)
from .utils import digest, digest_hex
