"""Exception hierarchy shared by the translator, the submitters and the CLI."""

from __future__ import annotations


class ShineError(RuntimeError):
    exit_code = 1


class CommandError(ShineError):
    pass


class UnrecognizedCommandError(CommandError):
    pass


class InvalidArgumentsError(CommandError):
    pass


class InvalidAccountNameError(ShineError, ValueError):
    pass


class ConfigError(ShineError):
    pass


class SubmissionError(ShineError):
    pass


class ChainRpcError(SubmissionError):
    def __init__(self, message: str, status_code: int | None = None, body: object = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
