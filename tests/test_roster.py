import pytest

from claim_match import INSUREDS, MatchResult, RosterEntry, match_insured, select_insured
from claim_match.steps import RosterMatcher


def test_matches_exact_roster_name() -> None:
    result = match_insured("Riley HealthCare LLC")

    assert result.insured_name == "Riley HealthCare LLC"
    assert result.internal_id == "A1B2"
    assert result.confidence >= 0.9


def test_match_is_normalization_invariant() -> None:
    result = match_insured("riley healthcare")

    assert result.insured_name == "Riley HealthCare LLC"
    assert result.internal_id == "A1B2"
    assert result.confidence == pytest.approx(1.0)


def test_unknown_name_is_echoed_back() -> None:
    result = match_insured("Foo Bar")

    assert result.insured_name == "Foo Bar"
    assert result.internal_id is None
    assert not result.matched
    assert 0.0 <= result.confidence < 0.8


def test_empty_name_returns_empty_result() -> None:
    result = match_insured("")

    assert result.insured_name == ""
    assert result.internal_id is None
    assert result.confidence == 0.0


def test_empty_roster_scores_zero() -> None:
    result = match_insured("Riley HealthCare LLC", roster=())

    assert result.insured_name == "Riley HealthCare LLC"
    assert result.internal_id is None
    assert result.confidence == 0.0


def test_first_roster_entry_wins_ties() -> None:
    roster = (RosterEntry("X1", "Acme LLC"), RosterEntry("X2", "Acme Inc."))

    assert match_insured("Acme", roster=roster).internal_id == "X1"


def test_threshold_is_inclusive() -> None:
    roster = (RosterEntry("T1", "abcde"),)

    at_threshold = match_insured("abcdx", roster=roster)
    below = match_insured("abcxx", roster=roster)

    assert at_threshold.internal_id == "T1"
    assert at_threshold.confidence == pytest.approx(0.8)
    assert below.internal_id is None
    assert below.insured_name == "abcxx"
    assert below.confidence == pytest.approx(0.6)


def test_matching_leaves_roster_untouched() -> None:
    before = list(INSUREDS)
    matcher = RosterMatcher()

    first = matcher.match("Evergreen Farms LTD")
    second = matcher.match("Evergreen Farms LTD")

    assert first == second
    assert first.internal_id == "I9J0"
    assert list(INSUREDS) == before


def test_manual_selection_returns_roster_entry() -> None:
    result = select_insured("I9J0")

    assert result == MatchResult(insured_name="Evergreen Farms Ltd.", internal_id="I9J0", confidence=1.0)


def test_manual_selection_of_unknown_id() -> None:
    assert select_insured("ZZZZ") is None
    assert RosterMatcher(roster=(RosterEntry("X1", "Acme LLC"),)).select("A1B2") is None


def test_matcher_selects_from_its_own_roster() -> None:
    matcher = RosterMatcher(roster=(RosterEntry("X1", "Acme LLC"),))

    result = matcher.select("X1")

    assert result is not None
    assert result.insured_name == "Acme LLC"
    assert result.confidence == 1.0
