"""JSON-RPC 2.0 value model.

Payload fields that were never supplied hold ABSENT; a field holding None
was supplied as JSON null. to_dict() drops ABSENT fields, which is how a
notification (no id) differs from a request with "id": null.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rpcmsg.core.constants import (
    ERROR_MESSAGES,
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    JSONRPC_VERSION,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_ERROR_MAX,
    SERVER_ERROR_MIN,
)
from rpcmsg.core.errors import RpcMessageError
from rpcmsg.core.types import ABSENT, Kind


@dataclass(frozen=True)
class ErrorObject:
    """JSON-RPC 2.0 error object.

    Attributes:
        code: Error code. Reserved codes are advisory only.
        message: Short description of the error.
        data: Optional additional information, ABSENT if not supplied.
    """

    code: int
    message: str
    data: Any = ABSENT

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not ABSENT:
            data["data"] = self.data
        return data


@dataclass
class RequestPayload:
    """JSON-RPC 2.0 request or notification.

    Attributes:
        jsonrpc: Protocol version, must be "2.0".
        method: Name of the method to invoke. Empty means invalid.
        params: Parameters for the method, ABSENT if not supplied.
        id: Request identifier. ABSENT means notification.
    """

    jsonrpc: str = JSONRPC_VERSION
    method: str = ""
    params: Any = ABSENT
    id: Any = ABSENT

    @property
    def is_notification(self) -> bool:
        return self.id is ABSENT

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "method": self.method}
        if self.params is not ABSENT:
            data["params"] = self.params
        if self.id is not ABSENT:
            data["id"] = self.id
        return data


@dataclass
class ResponsePayload:
    """JSON-RPC 2.0 response.

    Attributes:
        jsonrpc: Protocol version, always "2.0" when built here.
        result: Result of the method call (mutually exclusive with error).
        error: Error object if method failed (mutually exclusive with result).
        id: Identifier of the request this answers, ABSENT if not known.
    """

    jsonrpc: str = JSONRPC_VERSION
    result: Any = ABSENT
    error: ErrorObject | None = None
    id: Any = ABSENT

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc}
        if self.error is not None:
            data["error"] = self.error.to_dict()
        elif self.result is not ABSENT:
            data["result"] = self.result
        if self.id is not ABSENT:
            data["id"] = self.id
        return data


@dataclass
class ClassifiedRequest:
    """A parsed request with its classification.

    Attributes:
        kind: REQUEST, NOTIFICATION, or INVALID.
        payload: Everything that could be read from the message.
        error: Why the message is INVALID, None otherwise.
    """

    kind: Kind
    payload: RequestPayload
    error: RpcMessageError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the classification error, if any."""
        if self.error is not None:
            raise self.error


@dataclass
class ClassifiedResponse:
    """A parsed response with its classification.

    Attributes:
        kind: SUCCESS, ERROR, or INVALID.
        payload: Everything that could be read from the message.
        error: Why the message is INVALID, None otherwise.
    """

    kind: Kind
    payload: ResponsePayload
    error: RpcMessageError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the classification error, if any."""
        if self.error is not None:
            raise self.error


PARSE_ERROR_OBJECT = ErrorObject(PARSE_ERROR, ERROR_MESSAGES[PARSE_ERROR])
INVALID_REQUEST_OBJECT = ErrorObject(INVALID_REQUEST, ERROR_MESSAGES[INVALID_REQUEST])
METHOD_NOT_FOUND_OBJECT = ErrorObject(METHOD_NOT_FOUND, ERROR_MESSAGES[METHOD_NOT_FOUND])
INVALID_PARAMS_OBJECT = ErrorObject(INVALID_PARAMS, ERROR_MESSAGES[INVALID_PARAMS])
INTERNAL_ERROR_OBJECT = ErrorObject(INTERNAL_ERROR, ERROR_MESSAGES[INTERNAL_ERROR])


def standard_error(code: int, data: Any = ABSENT) -> ErrorObject:
    """Build the canonical error object for a reserved code.

    Args:
        code: One of the five reserved JSON-RPC error codes.
        data: Optional additional error data.

    Returns:
        An ErrorObject with the canonical message for the code.

    Raises:
        KeyError: If the code is not a reserved code.
    """
    return ErrorObject(code, ERROR_MESSAGES[code], data)


def is_server_error_code(code: int) -> bool:
    """Check if a code is in the implementation-defined server error range."""
    return SERVER_ERROR_MIN <= code <= SERVER_ERROR_MAX
