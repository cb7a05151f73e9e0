"""Unwrapping of enveloping relay responses.

Enveloping relays (AllOrigins ``/get``) answer with::

    {"contents": "<upstream body>", "status": {"http_code": 200, ...}}

The inner ``contents`` string is the upstream body and goes to the
parser unchanged.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any
from urllib.parse import unquote

from pyrtti._constants import PASS_THROUGH_STATUS_CODES
from pyrtti._redact import truncate
from pyrtti.exceptions import RttiRelayEnvelopeError

_DATA_URL_PREFIX = "data:"
_BASE64_MARKER = ";base64"


def _status_code(envelope: dict[str, Any]) -> int | None:
    status = envelope.get("status")
    if not isinstance(status, dict):
        return None
    code = status.get("http_code")
    if code is None:
        return None
    try:
        return int(code)
    except (TypeError, ValueError):
        return None


def _decode_data_url(contents: str, relay: str) -> str:
    """Decode ``data:<mime>[;base64],<payload>`` contents into text."""
    header, sep, payload = contents.partition(",")
    if not sep:
        raise RttiRelayEnvelopeError(f"Malformed data URL contents from {relay}", relay=relay)
    if not header.endswith(_BASE64_MARKER):
        return unquote(payload)
    try:
        return base64.b64decode(payload, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise RttiRelayEnvelopeError(f"Undecodable data URL contents from {relay}", relay=relay) from exc


def unwrap_relay_envelope(text: str, *, relay: str = "") -> str:
    """Return the upstream body carried in a relay envelope.

    A ``status.http_code`` of 200, or of RTTI's application-error status
    (500), passes through so error documents can still be classified.

    Raises
    ------
    RttiRelayEnvelopeError
        If the envelope is not JSON, reports another failing status, or
        has no ``contents``.
    """
    try:
        envelope = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RttiRelayEnvelopeError(f"Invalid envelope JSON from {relay}: {truncate(text)}", relay=relay) from exc

    if not isinstance(envelope, dict):
        raise RttiRelayEnvelopeError(f"Envelope from {relay} is not an object", relay=relay)

    status_code = _status_code(envelope)
    if status_code is not None and status_code not in PASS_THROUGH_STATUS_CODES:
        raise RttiRelayEnvelopeError(
            f"Relay {relay} reported upstream HTTP {status_code}",
            status_code=status_code,
            relay=relay,
        )

    contents = envelope.get("contents")
    if not isinstance(contents, str) or not contents.strip():
        raise RttiRelayEnvelopeError(
            f"Envelope from {relay} has no contents",
            status_code=status_code,
            relay=relay,
        )

    if contents.startswith(_DATA_URL_PREFIX):
        return _decode_data_url(contents, relay)
    return contents
