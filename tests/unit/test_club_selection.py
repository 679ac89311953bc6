"""
Unit tests for club selection parsing on student registration.
"""

import pytest

from club_registry.api.schemas.student_schemas import parse_club_selection


@pytest.mark.parametrize(("raw", "expected"), [(3, 3), ("12", 12), (" 7 ", 7), (4.0, 4)])
def test_numeric_selections_are_accepted(raw: object, expected: int) -> None:
    assert parse_club_selection(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "abc", "1.5", 0, -2, True, 2.5, [1]])
def test_non_numeric_selections_are_rejected(raw: object) -> None:
    with pytest.raises(ValueError, match="Invalid club selection."):
        parse_club_selection(raw)
