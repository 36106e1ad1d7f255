"""JSON-RPC 2.0 message building, parsing, and classification.

Example usage:
    from rpcmsg.rpc import build_request, parse_request

    text = build_request(1, "sum", [1, 2])
    parsed = parse_request(text)
    parsed.kind      # Kind.REQUEST
    parsed.payload   # RequestPayload(jsonrpc='2.0', method='sum', ...)
"""

from rpcmsg.core.constants import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    JSONRPC_VERSION,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_ERROR,
)
from rpcmsg.rpc.builder import (
    build_batch,
    build_error,
    build_error_object,
    build_notification,
    build_request,
    build_success,
    serialize_request,
    serialize_response,
)
from rpcmsg.rpc.protocol import (
    classify_request,
    classify_response,
    parse_request,
    parse_request_batch,
    parse_response,
    parse_response_batch,
)
from rpcmsg.rpc.types import (
    INTERNAL_ERROR_OBJECT,
    INVALID_PARAMS_OBJECT,
    INVALID_REQUEST_OBJECT,
    METHOD_NOT_FOUND_OBJECT,
    PARSE_ERROR_OBJECT,
    ClassifiedRequest,
    ClassifiedResponse,
    ErrorObject,
    RequestPayload,
    ResponsePayload,
    is_server_error_code,
    standard_error,
)

__all__ = [
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
    "classify_request",
    "classify_response",
    # Error codes
    "JSONRPC_VERSION",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "SERVER_ERROR",
    # Standard error objects
    "PARSE_ERROR_OBJECT",
    "INVALID_REQUEST_OBJECT",
    "METHOD_NOT_FOUND_OBJECT",
    "INVALID_PARAMS_OBJECT",
    "INTERNAL_ERROR_OBJECT",
    "standard_error",
    "is_server_error_code",
]
