"""JSON-RPC 2.0 message parsing and classification.

Parsing happens in two stages. Decoding turns text into a JSON object (or an
array of objects for batches); when that fails there is no payload, so the
error is raised. Classification then reads the members and labels the
message. A message that decodes but breaks a JSON-RPC rule is not raised:
it comes back with kind INVALID, the error attached, and whatever fields
could be read.

Inbound ids are taken as sent and are not checked against the outbound
identifier rules.
"""

from __future__ import annotations

import copy
import json
import logging
from typing import Any

from rpcmsg.config.schema import DEFAULT_CONFIG, CodecConfig
from rpcmsg.core.constants import (
    EMPTY_BATCH,
    EMPTY_MESSAGE,
    JSONRPC_VERSION,
    MALFORMED_MESSAGE,
    MALFORMED_OBJECT,
    MIN_BATCH_LENGTH,
    VERSION_MISMATCH,
)
from rpcmsg.core.errors import (
    BatchTooLargeError,
    EmptyMessageError,
    MalformedMessageError,
    MalformedObjectError,
    MessageTooLargeError,
    VersionMismatchError,
)
from rpcmsg.core.types import ABSENT, Kind, ValueKind, kind_of
from rpcmsg.rpc.types import (
    ClassifiedRequest,
    ClassifiedResponse,
    ErrorObject,
    RequestPayload,
    ResponsePayload,
)

logger = logging.getLogger(__name__)


def _check_size(text: str, config: CodecConfig) -> None:
    limit = config.max_message_size
    if limit is not None and len(text) > limit:
        raise MessageTooLargeError(len(text), limit)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def _decode(text: str, expected: ValueKind) -> Any:
    """Decode text and check the top-level JSON kind."""
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    # ValueError covers JSONDecodeError and over-long integer literals
    except (ValueError, RecursionError) as e:
        raise MalformedMessageError(MALFORMED_MESSAGE) from e

    if kind_of(data) is not expected:
        raise MalformedMessageError(MALFORMED_MESSAGE)
    return data


def _as_int(value: Any) -> int:
    """Read a JSON number as int. Non-integral or non-numeric values give 0."""
    kind = kind_of(value)
    if kind is ValueKind.INTEGER:
        return value
    if kind is ValueKind.FLOAT and value.is_integer():
        return int(value)
    return 0


def _read_string(data: dict[str, Any], key: str) -> str:
    value = data.get(key, ABSENT)
    return value if kind_of(value) is ValueKind.STRING else ""


def _read_error_object(value: Any) -> ErrorObject:
    """Populate an ErrorObject from a decoded error member."""
    if kind_of(value) is not ValueKind.OBJECT:
        return ErrorObject(code=0, message="")
    return ErrorObject(
        code=_as_int(value.get("code")),
        message=_read_string(value, "message"),
        data=value.get("data", ABSENT),
    )


def _classify_request(data: dict[str, Any]) -> ClassifiedRequest:
    payload = RequestPayload(
        jsonrpc=_read_string(data, "jsonrpc"),
        method=_read_string(data, "method"),
        params=data.get("params", ABSENT),
        id=data.get("id", ABSENT),
    )

    if data.get("jsonrpc") != JSONRPC_VERSION:
        logger.debug("Invalid request version: %r", data.get("jsonrpc"))
        return ClassifiedRequest(Kind.INVALID, payload, VersionMismatchError(VERSION_MISMATCH))
    if not payload.method:
        logger.debug("Invalid request: missing method")
        return ClassifiedRequest(Kind.INVALID, payload, MalformedObjectError(MALFORMED_OBJECT))
    if payload.is_notification:
        return ClassifiedRequest(Kind.NOTIFICATION, payload)
    return ClassifiedRequest(Kind.REQUEST, payload)


def _classify_response(data: dict[str, Any]) -> ClassifiedResponse:
    # error wins over result; a present result counts whatever its value
    has_error = "error" in data
    payload = ResponsePayload(
        jsonrpc=_read_string(data, "jsonrpc"),
        result=data.get("result", ABSENT),
        error=_read_error_object(data["error"]) if has_error else None,
        id=data.get("id", ABSENT),
    )

    if data.get("jsonrpc") != JSONRPC_VERSION:
        logger.debug("Invalid response version: %r", data.get("jsonrpc"))
        return ClassifiedResponse(Kind.INVALID, payload, VersionMismatchError(VERSION_MISMATCH))
    if has_error:
        return ClassifiedResponse(Kind.ERROR, payload)
    if payload.result is not ABSENT:
        return ClassifiedResponse(Kind.SUCCESS, payload)
    logger.debug("Invalid response: neither result nor error")
    return ClassifiedResponse(Kind.INVALID, payload, MalformedObjectError(MALFORMED_OBJECT))


def _decode_message(text: str, config: CodecConfig | None) -> dict[str, Any]:
    config = config or DEFAULT_CONFIG
    if not text or not text.strip():
        raise EmptyMessageError(EMPTY_MESSAGE)
    _check_size(text, config)
    return _decode(text, ValueKind.OBJECT)


def _decode_batch(text: str, config: CodecConfig | None) -> list[dict[str, Any]]:
    config = config or DEFAULT_CONFIG
    if not text or len(text) < MIN_BATCH_LENGTH:
        raise EmptyMessageError(EMPTY_BATCH)
    _check_size(text, config)
    items = _decode(text, ValueKind.ARRAY)

    for item in items:
        if kind_of(item) is not ValueKind.OBJECT:
            raise MalformedMessageError(MALFORMED_MESSAGE)

    limit = config.max_batch_size
    if limit is not None and len(items) > limit:
        raise BatchTooLargeError(len(items), limit)

    logger.debug("Decoded batch of %d messages", len(items))
    return items


def parse_request(text: str, *, config: CodecConfig | None = None) -> ClassifiedRequest:
    """Parse and classify a single JSON-RPC 2.0 request.

    Args:
        text: Raw message text.
        config: Size limits. None means defaults.

    Returns:
        The classified request. Check .kind and .error; an INVALID message
        is returned, not raised.

    Raises:
        EmptyMessageError: If text is empty.
        MalformedMessageError: If text is not a JSON object.
    """
    return _classify_request(_decode_message(text, config))


def parse_response(text: str, *, config: CodecConfig | None = None) -> ClassifiedResponse:
    """Parse and classify a single JSON-RPC 2.0 response.

    Args:
        text: Raw message text.
        config: Size limits. None means defaults.

    Returns:
        The classified response. Check .kind and .error; an INVALID message
        is returned, not raised.

    Raises:
        EmptyMessageError: If text is empty.
        MalformedMessageError: If text is not a JSON object.
    """
    return _classify_response(_decode_message(text, config))


def parse_request_batch(
    text: str, *, config: CodecConfig | None = None
) -> list[ClassifiedRequest]:
    """Parse and classify a batch of JSON-RPC 2.0 requests.

    Each element is classified on its own; an INVALID element does not stop
    the others.

    Args:
        text: Raw batch text.
        config: Size limits. None means defaults.

    Returns:
        One ClassifiedRequest per element, in input order.

    Raises:
        EmptyMessageError: If text is shorter than "[]".
        MalformedMessageError: If text is not a JSON array of objects.
    """
    return [_classify_request(item) for item in _decode_batch(text, config)]


def parse_response_batch(
    text: str, *, config: CodecConfig | None = None
) -> list[ClassifiedResponse]:
    """Parse and classify a batch of JSON-RPC 2.0 responses.

    Args:
        text: Raw batch text.
        config: Size limits. None means defaults.

    Returns:
        One ClassifiedResponse per element, in input order.

    Raises:
        EmptyMessageError: If text is shorter than "[]".
        MalformedMessageError: If text is not a JSON array of objects.
    """
    return [_classify_response(item) for item in _decode_batch(text, config)]


def classify_request(data: dict[str, Any]) -> ClassifiedRequest:
    """Classify a decoded JSON object as a request.

    The payload holds copies of the members of data, so later changes to
    data do not reach it.

    Args:
        data: A decoded JSON object.

    Returns:
        REQUEST when an id is present, NOTIFICATION when it is not, or
        INVALID with VersionMismatchError / MalformedObjectError attached.
    """
    return _classify_request(copy.deepcopy(data))


def classify_response(data: dict[str, Any]) -> ClassifiedResponse:
    """Classify a decoded JSON object as a response.

    An error member wins over a result member. A result member counts as
    present whatever its value, so 0, "", false, [] and null are all results.
    The payload holds copies of the members of data.

    Args:
        data: A decoded JSON object.

    Returns:
        ERROR, SUCCESS, or INVALID with VersionMismatchError /
        MalformedObjectError attached.
    """
    return _classify_response(copy.deepcopy(data))
