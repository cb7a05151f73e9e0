"""Decode RTTI ``/buses`` bodies.

Relays do not preserve the upstream content type, so the format is
sniffed from the body itself: a leading ``{`` or ``[`` is tried as
JSON, and anything containing ``<`` is tried as XML. The sniff is only
a hint; a JSON decode failure still falls through to the XML check,
which reads from the first ``<`` onward.

Endpoints:
  - GET /buses
"""

from __future__ import annotations

import json
import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Iterator
from typing import Any

from pydantic import ValidationError

from pyrtti.ingestion.normalize import safe_str
from pyrtti.models.outcomes import ParseOutcome, ParseSuccess, ParseUnparseable, ParseUpstreamError
from pyrtti.models.vehicle import VehicleRecord

_logger = logging.getLogger(__name__)

_VEHICLE_TAG = "Bus"
_CONTAINER_TAG = "Buses"
_ERROR_TAG = "Error"
_XML_FIELDS = (
    "VehicleNo",
    "RouteNo",
    "Direction",
    "Destination",
    "Pattern",
    "Latitude",
    "Longitude",
    "RecordedTime",
)


def _build_records(items: Iterable[Any]) -> list[VehicleRecord]:
    """Validate raw vehicle dicts, silently dropping invalid entries."""
    records: list[VehicleRecord] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            records.append(VehicleRecord.model_validate(item))
        except ValidationError:
            _logger.debug("Dropping invalid vehicle entry: %s", item.get("VehicleNo"))
    return records


# ------------------------------------------------------------------
# JSON
# ------------------------------------------------------------------


def _parse_json(text: str) -> ParseOutcome | None:
    """Decode a JSON body, or return ``None`` if it is not a recognised shape."""
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        return None

    if isinstance(data, list):
        return ParseSuccess(_build_records(data))
    if isinstance(data, dict):
        if data.get("Code"):
            return ParseUpstreamError(code=safe_str(data["Code"]), message=safe_str(data.get("Message")))
        if data.get("VehicleNo"):
            return ParseSuccess(_build_records([data]))
    return None


# ------------------------------------------------------------------
# XML
# ------------------------------------------------------------------


def _local_name(tag: Any) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _iter_named(element: ET.Element, name: str) -> Iterator[ET.Element]:
    for child in element.iter():
        if _local_name(child.tag) == name:
            yield child


def _child_text(element: ET.Element, name: str) -> str:
    for child in _iter_named(element, name):
        if child is not element:
            return child.text or ""
    return ""


def _bus_element_to_dict(element: ET.Element) -> dict[str, Any]:
    raw: dict[str, Any] = {name: _child_text(element, name) for name in _XML_FIELDS}
    raw["RouteMap"] = {"Href": _child_text(element, "Href")}
    return raw


def _parse_xml(text: str) -> ParseOutcome:
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        return ParseUnparseable(f"invalid XML: {exc}")

    error = next(_iter_named(root, _ERROR_TAG), None)
    if error is not None:
        return ParseUpstreamError(code=_child_text(error, "Code"), message=_child_text(error, "Message"))

    records = _build_records(_bus_element_to_dict(bus) for bus in _iter_named(root, _VEHICLE_TAG))
    if records:
        return ParseSuccess(records)

    if next(_iter_named(root, _CONTAINER_TAG), None) is not None:
        return ParseSuccess([])

    return ParseUnparseable(f"no usable <{_VEHICLE_TAG}> elements under <{_local_name(root.tag)}>")


def parse(body: str) -> ParseOutcome:
    """Decode a raw ``/buses`` body into records, an error, or nothing.

    Parameters
    ----------
    body : str
        Response text as delivered by a relay (after envelope unwrap).

    Returns
    -------
    ParseOutcome
        ``ParseSuccess`` (possibly empty), ``ParseUpstreamError`` for an
        RTTI error document, or ``ParseUnparseable``.
    """
    if not isinstance(body, str):
        return ParseUnparseable("body is not text")
    text = body.strip()
    if not text:
        return ParseUnparseable("empty body")

    if text[0] in "{[":
        outcome = _parse_json(text)
        if outcome is not None:
            return outcome

    # Some relays prepend stray characters; XML starts at the first tag.
    start = text.find("<")
    if start >= 0:
        return _parse_xml(text[start:])

    return ParseUnparseable(f"unrecognised body: {text[:64]!r}")
