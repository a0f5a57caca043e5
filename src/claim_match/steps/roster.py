from __future__ import annotations

import logging
from collections.abc import Sequence

from claim_match.datasets.roster import INSUREDS
from claim_match.models import MatchResult, RosterEntry
from claim_match.steps.distance import levenshtein
from claim_match.steps.normalize import normalize_name

logger = logging.getLogger(__name__)

MATCH_THRESHOLD = 0.8


def match_insured(
    extracted: str | None,
    roster: Sequence[RosterEntry] = INSUREDS,
    threshold: float = MATCH_THRESHOLD,
) -> MatchResult:
    """Resolve an extracted insured name to the closest roster entry.

    Below ``threshold`` the original text is echoed back without an id, with
    the best score found as its confidence.
    """
    if not extracted:
        logger.debug("Empty extracted name, nothing to match")
        return MatchResult(insured_name="", confidence=0.0)

    normalized = normalize_name(extracted)
    logger.debug("Matching %r (normalized %r)", extracted, normalized)

    scored = [(entry, _score(normalized, normalize_name(entry.name))) for entry in roster]

    best: tuple[RosterEntry, float] | None = None
    for entry, score in scored:
        if score > 0.5:
            logger.debug("Candidate %r scored %.2f", entry.name, score)
        if best is None or score > best[1]:
            best = (entry, score)

    if best is None or best[1] < threshold:
        best_score = best[1] if best else 0.0
        ranked = sorted(scored, key=lambda item: -item[1])
        for rank, (entry, score) in enumerate(ranked[:3], start=1):
            logger.debug("Top %d: %s (%.1f%%)", rank, entry.name, score * 100)
        logger.info("No roster match for %r (best score %.2f)", extracted, best_score)
        return MatchResult(insured_name=extracted, confidence=best_score)

    entry, score = best
    logger.info("Matched %r to %s (%s) with confidence %.2f", extracted, entry.name, entry.internal_id, score)
    return MatchResult(insured_name=entry.name, internal_id=entry.internal_id, confidence=score)


class RosterMatcher:
    """Matches insured names against a fixed roster."""

    def __init__(self, roster: Sequence[RosterEntry] = INSUREDS, threshold: float = MATCH_THRESHOLD) -> None:
        self._roster = tuple(roster)
        self._threshold = threshold

    @property
    def roster(self) -> tuple[RosterEntry, ...]:
        return self._roster

    def match(self, extracted: str | None) -> MatchResult:
        return match_insured(extracted, roster=self._roster, threshold=self._threshold)

    def select(self, internal_id: str) -> MatchResult | None:
        return select_insured(internal_id, roster=self._roster)


def select_insured(internal_id: str, roster: Sequence[RosterEntry] = INSUREDS) -> MatchResult | None:
    """Manual override: pin a result to the roster entry with ``internal_id``."""
    for entry in roster:
        if entry.internal_id == internal_id:
            logger.info("Manually selected %s (%s)", entry.name, entry.internal_id)
            return MatchResult(insured_name=entry.name, internal_id=entry.internal_id, confidence=1.0)
    logger.warning("No roster entry with id %r", internal_id)
    return None


def _score(left: str, right: str) -> float:
    max_len = max(len(left), len(right))
    if max_len == 0:
        return 0.0
    return 1.0 - levenshtein(left, right) / max_len
