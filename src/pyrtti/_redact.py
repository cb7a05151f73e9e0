"""Helpers for safe logging.

Request URLs embed the RTTI API key, both directly and percent-encoded
inside relay URLs. This module masks it before URLs reach log records
or exception messages.
"""

from __future__ import annotations

import re

# Matches ``apikey=<value>`` and its encoded forms ``apikey%3D<value>``
# / ``apikey%253D<value>`` as they appear once nested in a relay URL.
_API_KEY_RE = re.compile(r"(?i)(apikey(?:=|%3D|%253D))([^&%\s]+)")


def redact_url(url: str) -> str:
    """Return *url* with every API key value replaced by ``<redacted>``."""
    return _API_KEY_RE.sub(r"\1<redacted>", url)


def truncate(value: str, *, max_string: int = 200) -> str:
    """Shorten *value* for log output."""
    if len(value) > max_string:
        return f"{value[:max_string]}…<truncated>"
    return value
