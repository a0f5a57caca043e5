import pytest

from claim_match import normalize_name


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Riley HealthCare LLC", "riley healthcare"),
        ("Acme, Inc.", "acme"),
        ("Global Trading Co., Ltd.", "global trading"),
        ("Group Therapy LLC", "group therapy"),
        ("Northstar Logistics Inc. ", "northstar logistics"),
        ("Metro Transit Authority", "metro transit authority"),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_name(raw: str | None, expected: str) -> None:
    assert normalize_name(raw) == expected


def test_suffix_word_alone_is_kept() -> None:
    assert normalize_name("Group") == "group"


@pytest.mark.parametrize(
    "raw",
    ["Riley HealthCare LLC", "Global Trading Co., Ltd.", "Majestic Resorts & Spas Ltd.", "  Acme   Inc  "],
)
def test_normalize_name_is_idempotent(raw: str) -> None:
    once = normalize_name(raw)
    assert normalize_name(once) == once
