"""JSON-RPC 2.0 message construction and serialization.

Every build_* function validates the id before anything is serialized, so
a bad id never produces text. Output is compact JSON with a fixed key order:
jsonrpc, method, params, id for requests and jsonrpc, result|error, id for
responses.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from rpcmsg.config.schema import DEFAULT_CONFIG, CodecConfig
from rpcmsg.core.constants import JSONRPC_VERSION, MISSING_RESULT
from rpcmsg.core.errors import MalformedMessageError, MalformedObjectError, MissingResultError
from rpcmsg.core.identifiers import validate_identifier
from rpcmsg.core.types import ABSENT
from rpcmsg.rpc.types import ErrorObject, RequestPayload, ResponsePayload

logger = logging.getLogger(__name__)


def _dumps(data: Any, config: CodecConfig | None) -> str:
    config = config or DEFAULT_CONFIG
    try:
        return json.dumps(
            data,
            separators=(",", ":"),
            ensure_ascii=config.ensure_ascii,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise MalformedMessageError(f"value is not JSON serializable: {e}") from e


def serialize_request(request: RequestPayload, *, config: CodecConfig | None = None) -> str:
    """Serialize a RequestPayload to a JSON line.

    Args:
        request: The RequestPayload to serialize.
        config: Encoder options. None means defaults.

    Returns:
        A single line of JSON text (no trailing newline).

    Raises:
        MalformedMessageError: If params hold a value JSON cannot represent.
    """
    return _dumps(request.to_dict(), config)


def serialize_response(response: ResponsePayload, *, config: CodecConfig | None = None) -> str:
    """Serialize a ResponsePayload to a JSON line.

    Args:
        response: The ResponsePayload to serialize.
        config: Encoder options. None means defaults.

    Returns:
        A single line of JSON text (no trailing newline).

    Raises:
        MalformedMessageError: If result or error data hold a value JSON
            cannot represent.
    """
    return _dumps(response.to_dict(), config)


def build_request(
    request_id: Any,
    method: str,
    params: Any = ABSENT,
    *,
    config: CodecConfig | None = None,
) -> str:
    """Create a JSON-RPC 2.0 request.

    Args:
        request_id: String, integer, or None. ABSENT makes a notification;
            None is sent as "id": null.
        method: Name of the method to invoke.
        params: Optional parameters, omitted from the output when ABSENT.
        config: Encoder options. None means defaults.

    Returns:
        The serialized request.

    Raises:
        IdentifierError: If request_id is not a valid identifier.
    """
    validate_identifier(request_id)
    payload = RequestPayload(
        jsonrpc=JSONRPC_VERSION,
        method=method,
        params=params,
        id=request_id,
    )
    return serialize_request(payload, config=config)


def build_notification(
    method: str,
    params: Any = ABSENT,
    *,
    config: CodecConfig | None = None,
) -> str:
    """Create a JSON-RPC 2.0 notification. The output never has an id."""
    return build_request(ABSENT, method, params, config=config)


def build_success(
    request_id: Any,
    result: Any,
    *,
    config: CodecConfig | None = None,
) -> str:
    """Create a JSON-RPC 2.0 success response.

    Args:
        request_id: The id from the original request.
        result: The result of the method call. Required.
        config: Encoder options. None means defaults.

    Returns:
        The serialized response.

    Raises:
        IdentifierError: If request_id is not a valid identifier.
        MissingResultError: If result is None or ABSENT.
    """
    validate_identifier(request_id)
    if result is None or result is ABSENT:
        raise MissingResultError(MISSING_RESULT)
    payload = ResponsePayload(jsonrpc=JSONRPC_VERSION, result=result, id=request_id)
    return serialize_response(payload, config=config)


def build_error(
    request_id: Any,
    error: ErrorObject | Mapping[str, Any],
    *,
    config: CodecConfig | None = None,
) -> str:
    """Create a JSON-RPC 2.0 error response.

    Args:
        request_id: The id from the original request. ABSENT omits the id.
        error: An ErrorObject, or a mapping with code, message and
            optional data.
        config: Encoder options. None means defaults.

    Returns:
        The serialized response.

    Raises:
        IdentifierError: If request_id is not a valid identifier.
        MalformedObjectError: If a mapping error lacks code or message.
    """
    validate_identifier(request_id)
    if not isinstance(error, ErrorObject):
        if "code" not in error or "message" not in error:
            raise MalformedObjectError("error must have 'code' and 'message' fields")
        error = build_error_object(error["code"], error["message"], error.get("data", ABSENT))
    payload = ResponsePayload(jsonrpc=JSONRPC_VERSION, error=error, id=request_id)
    return serialize_response(payload, config=config)


def build_error_object(code: int, message: str, data: Any = ABSENT) -> ErrorObject:
    """Create an error object. No validation is done."""
    return ErrorObject(code=code, message=message, data=data)


def build_batch(items: Iterable[str]) -> str:
    """Join serialized messages into one JSON array.

    Args:
        items: Already serialized request or response strings, in order.

    Returns:
        "[]" for no items, otherwise the items separated by commas.
    """
    items = list(items)
    logger.debug("Building batch of %d messages", len(items))
    return "[" + ",".join(items) + "]"
