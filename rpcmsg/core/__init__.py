"""Core types, constants, and errors."""

from rpcmsg.core.errors import (
    BatchTooLargeError,
    ConfigError,
    EmptyMessageError,
    IdentifierError,
    MalformedMessageError,
    MalformedObjectError,
    MessageTooLargeError,
    MissingResultError,
    RpcMessageError,
    VersionMismatchError,
)
from rpcmsg.core.identifiers import is_valid_identifier, validate_identifier
from rpcmsg.core.types import ABSENT, Kind, ValueKind, is_present, kind_of

__all__ = [
    "ABSENT",
    "Kind",
    "ValueKind",
    "is_present",
    "kind_of",
    "validate_identifier",
    "is_valid_identifier",
    "RpcMessageError",
    "EmptyMessageError",
    "MalformedMessageError",
    "MessageTooLargeError",
    "BatchTooLargeError",
    "VersionMismatchError",
    "MalformedObjectError",
    "IdentifierError",
    "MissingResultError",
    "ConfigError",
]
