"""rpcmsg - JSON-RPC 2.0 message builder, parser, and classifier.

The library works on text in and text out; wiring it to a transport and
dispatching methods is left to the caller.
"""

from rpcmsg.config import CodecConfig, load_config
from rpcmsg.core import (
    ABSENT,
    BatchTooLargeError,
    ConfigError,
    EmptyMessageError,
    IdentifierError,
    Kind,
    MalformedMessageError,
    MalformedObjectError,
    MessageTooLargeError,
    MissingResultError,
    RpcMessageError,
    ValueKind,
    VersionMismatchError,
    kind_of,
    validate_identifier,
)
from rpcmsg.rpc import (
    INTERNAL_ERROR,
    INTERNAL_ERROR_OBJECT,
    INVALID_PARAMS,
    INVALID_PARAMS_OBJECT,
    INVALID_REQUEST,
    INVALID_REQUEST_OBJECT,
    JSONRPC_VERSION,
    METHOD_NOT_FOUND,
    METHOD_NOT_FOUND_OBJECT,
    PARSE_ERROR,
    PARSE_ERROR_OBJECT,
    SERVER_ERROR,
    ClassifiedRequest,
    ClassifiedResponse,
    ErrorObject,
    RequestPayload,
    ResponsePayload,
    build_batch,
    build_error,
    build_error_object,
    build_notification,
    build_request,
    build_success,
    is_server_error_code,
    parse_request,
    parse_request_batch,
    parse_response,
    parse_response_batch,
    serialize_request,
    serialize_response,
    standard_error,
)

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "Kind",
    "ValueKind",
    "kind_of",
    "validate_identifier",
    # Types
    "RequestPayload",
    "ResponsePayload",
    "ErrorObject",
    "ClassifiedRequest",
    "ClassifiedResponse",
    # Builder
    "build_request",
    "build_notification",
    "build_success",
    "build_error",
    "build_error_object",
    "build_batch",
    "serialize_request",
    "serialize_response",
    # Parser
    "parse_request",
    "parse_response",
    "parse_request_batch",
    "parse_response_batch",
    # Error codes
    "JSONRPC_VERSION",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "SERVER_ERROR",
    "PARSE_ERROR_OBJECT",
    "INVALID_REQUEST_OBJECT",
    "METHOD_NOT_FOUND_OBJECT",
    "INVALID_PARAMS_OBJECT",
    "INTERNAL_ERROR_OBJECT",
    "standard_error",
    "is_server_error_code",
    # Config
    "CodecConfig",
    "load_config",
    # Exceptions
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
