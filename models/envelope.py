"""Success and error envelopes returned by the v1 bridge API.

Mutating calls (pairing, state updates) answer with a JSON array whose entries
are either ``{"success": ...}`` or ``{"error": {"type", "address",
"description"}}``. There is no discriminant field, so each entry is matched
against the two known structures.
"""

from dataclasses import dataclass
from typing import Any, Union

from core.errors import UnexpectedResponseError


@dataclass(frozen=True)
class SuccessEnvelope:
    """A successful result; the payload shape depends on the call."""
    success: Any


@dataclass(frozen=True)
class ErrorEnvelope:
    """A bridge error. ``type`` is the bridge's numeric error code."""
    type: int
    address: str
    description: str


Envelope = Union[SuccessEnvelope, ErrorEnvelope]

# Bridge error codes
ERROR_LINK_BUTTON_NOT_PRESSED = 101
ERROR_DEVICE_IS_OFF = 201


def _match_entry(entry: Any) -> Envelope | None:
    if not isinstance(entry, dict) or len(entry) != 1:
        return None

    if 'success' in entry:
        return SuccessEnvelope(success=entry['success'])

    error = entry.get('error')
    if not isinstance(error, dict):
        return None

    error_type = error.get('type')
    address = error.get('address')
    description = error.get('description')
    if (isinstance(error_type, int) and not isinstance(error_type, bool)
            and isinstance(address, str) and isinstance(description, str)):
        return ErrorEnvelope(type=error_type, address=address, description=description)
    return None


def decode_envelopes(payload: Any) -> list[Envelope]:
    """Decode a bridge response array into envelopes.

    Args:
        payload: Decoded JSON body

    Returns:
        One envelope per array entry, in order

    Raises:
        UnexpectedResponseError: If the body is not a non-empty array or any
            entry matches neither shape
    """
    if not isinstance(payload, list) or not payload:
        raise UnexpectedResponseError(f"Unexpected response from the hue bridge: {payload!r}")

    envelopes = []
    for entry in payload:
        envelope = _match_entry(entry)
        if envelope is None:
            raise UnexpectedResponseError(f"Unexpected response from the hue bridge: {entry!r}")
        envelopes.append(envelope)
    return envelopes


def first_error(envelopes: list[Envelope]) -> ErrorEnvelope | None:
    """Return the first error envelope, or None if every entry succeeded."""
    for envelope in envelopes:
        if isinstance(envelope, ErrorEnvelope):
            return envelope
    return None
