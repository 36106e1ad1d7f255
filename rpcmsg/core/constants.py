"""Protocol constants for rpcmsg.

Single source of truth for the version tag and the reserved error codes.
"""

JSONRPC_VERSION = "2.0"

# Shortest text that can hold a batch: "[]"
MIN_BATCH_LENGTH = 2

# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
SERVER_ERROR = -32000  # Server error range: -32000 to -32099
SERVER_ERROR_MIN = -32099
SERVER_ERROR_MAX = -32000

ERROR_MESSAGES: dict[int, str] = {
    PARSE_ERROR: "Parse error",
    INVALID_REQUEST: "Invalid Request",
    METHOD_NOT_FOUND: "Method not found",
    INVALID_PARAMS: "Invalid params",
    INTERNAL_ERROR: "Internal error",
}

# Error texts carried by raised/returned errors
EMPTY_MESSAGE = "empty jsonrpc message"
EMPTY_BATCH = "empty message"
MALFORMED_MESSAGE = "invalid jsonrpc message structures"
VERSION_MISMATCH = "invalid jsonrpc version"
MALFORMED_OBJECT = "invalid jsonrpc object"
INVALID_IDENTIFIER = "invalid id that MUST contain a String, Number, or NULL value"
MISSING_RESULT = "result parameter is required"
