"""Message identifier validation.

Outbound ids MUST be a string, an integer, or null. An absent id is also
accepted; it is what makes a request a notification. Inbound ids are never
passed through here: the parser takes whatever the peer sent.

Usage:
    from rpcmsg.core.identifiers import validate_identifier

    validate_identifier("abc")   # ok
    validate_identifier(True)    # raises IdentifierError
"""

from __future__ import annotations

from typing import Any

from rpcmsg.core.constants import INVALID_IDENTIFIER
from rpcmsg.core.errors import IdentifierError
from rpcmsg.core.types import ValueKind, kind_of

VALID_IDENTIFIER_KINDS: frozenset[ValueKind] = frozenset({
    ValueKind.ABSENT,
    ValueKind.NULL,
    ValueKind.STRING,
    ValueKind.INTEGER,
})


def validate_identifier(request_id: Any) -> None:
    """Check that an outbound id is absent, null, a string, or an integer.

    Args:
        request_id: The id the caller wants to send.

    Raises:
        IdentifierError: For booleans, floats, arrays, objects, or anything
            that is not a JSON value.
    """
    try:
        kind = kind_of(request_id)
    except TypeError as e:
        raise IdentifierError(INVALID_IDENTIFIER) from e
    if kind not in VALID_IDENTIFIER_KINDS:
        raise IdentifierError(INVALID_IDENTIFIER)


def is_valid_identifier(request_id: Any) -> bool:
    """Check if an id is valid without raising exception."""
    try:
        validate_identifier(request_id)
        return True
    except IdentifierError:
        return False
