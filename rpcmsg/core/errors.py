"""Typed exception hierarchy for rpcmsg."""

from __future__ import annotations


class RpcMessageError(Exception):
    """Base class for all rpcmsg errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EmptyMessageError(RpcMessageError):
    """Raised when there is no input to decode."""


class MalformedMessageError(RpcMessageError):
    """Raised when input is not valid JSON or not the expected JSON shape."""


class MessageTooLargeError(MalformedMessageError):
    """Raised when inbound text exceeds the configured size limit."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"jsonrpc message too large: {size} > {limit}")


class BatchTooLargeError(MalformedMessageError):
    """Raised when a batch holds more elements than the configured limit."""

    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(f"jsonrpc batch too large: {count} > {limit}")


class VersionMismatchError(RpcMessageError):
    """The jsonrpc member is missing or not "2.0"."""


class MalformedObjectError(RpcMessageError):
    """The message is JSON but not a valid JSON-RPC object."""


class IdentifierError(RpcMessageError):
    """Raised when an outbound id is not a string, integer, or null."""


class MissingResultError(RpcMessageError):
    """Raised when a success response is built without a result."""


class ConfigError(RpcMessageError):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""
