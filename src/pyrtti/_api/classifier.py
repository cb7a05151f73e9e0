"""Map RTTI vendor error codes onto what the relay chain should do."""

from __future__ import annotations

from pyrtti._constants import INVALID_API_KEY_CODES, NO_BUSES_FOUND_CODES, ROUTE_NOT_FOUND_CODES
from pyrtti.models.outcomes import ClassifiedOutcome

UPSTREAM_ERROR_CODES: dict[str, ClassifiedOutcome] = {
    **{code: ClassifiedOutcome.EMPTY_RESULT for code in NO_BUSES_FOUND_CODES},
    **{code: ClassifiedOutcome.ROUTE_NOT_FOUND for code in ROUTE_NOT_FOUND_CODES},
    **{code: ClassifiedOutcome.FATAL_CREDENTIAL for code in INVALID_API_KEY_CODES},
}


def classify(code: str) -> ClassifiedOutcome:
    """Classify an RTTI error code by exact match.

    Codes missing from :data:`UPSTREAM_ERROR_CODES` are
    ``UNKNOWN_UPSTREAM_ERROR``.
    """
    return UPSTREAM_ERROR_CODES.get(str(code).strip(), ClassifiedOutcome.UNKNOWN_UPSTREAM_ERROR)


def is_empty_answer(outcome: ClassifiedOutcome) -> bool:
    """Whether *outcome* means "zero vehicles" rather than a failure."""
    return outcome in (ClassifiedOutcome.EMPTY_RESULT, ClassifiedOutcome.ROUTE_NOT_FOUND)
