from __future__ import annotations

import pytest

from pyrtti._api.classifier import UPSTREAM_ERROR_CODES, classify, is_empty_answer
from pyrtti.models.outcomes import ClassifiedOutcome


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("3005", ClassifiedOutcome.EMPTY_RESULT),
        ("1012", ClassifiedOutcome.EMPTY_RESULT),
        ("3002", ClassifiedOutcome.ROUTE_NOT_FOUND),
        ("1002", ClassifiedOutcome.FATAL_CREDENTIAL),
        ("9999", ClassifiedOutcome.UNKNOWN_UPSTREAM_ERROR),
        ("", ClassifiedOutcome.UNKNOWN_UPSTREAM_ERROR),
    ],
)
def test_classify(code: str, expected: ClassifiedOutcome) -> None:
    assert classify(code) is expected


def test_classify_strips_whitespace() -> None:
    assert classify(" 3005\n") is ClassifiedOutcome.EMPTY_RESULT


def test_classify_is_exact_match_not_substring() -> None:
    assert classify("30050") is ClassifiedOutcome.UNKNOWN_UPSTREAM_ERROR
    assert classify("3005: No Bus") is ClassifiedOutcome.UNKNOWN_UPSTREAM_ERROR


def test_table_never_maps_to_unknown() -> None:
    assert ClassifiedOutcome.UNKNOWN_UPSTREAM_ERROR not in UPSTREAM_ERROR_CODES.values()


def test_is_empty_answer() -> None:
    assert is_empty_answer(ClassifiedOutcome.EMPTY_RESULT)
    assert is_empty_answer(ClassifiedOutcome.ROUTE_NOT_FOUND)
    assert not is_empty_answer(ClassifiedOutcome.FATAL_CREDENTIAL)
    assert not is_empty_answer(ClassifiedOutcome.UNKNOWN_UPSTREAM_ERROR)
