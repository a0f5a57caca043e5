from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from claim_match.datasets.roster import INSUREDS
from claim_match.interfaces import ClaimComparator, ClaimParser, InsuredExtractor
from claim_match.models import PipelineResult, ProcessedClaim, RosterEntry
from claim_match.steps.comparison import WeightedClaimComparator
from claim_match.steps.roster import RosterMatcher

logger = logging.getLogger(__name__)


class LocalClaimPipeline:
    """In-process runner: parse, extract and match each document, then scan the batch."""

    def __init__(
        self,
        parser: ClaimParser,
        extractor: InsuredExtractor,
        roster: Sequence[RosterEntry] = INSUREDS,
        comparator: ClaimComparator | None = None,
    ) -> None:
        self._parser = parser
        self._extractor = extractor
        self._roster_matcher = RosterMatcher(roster)
        self._comparator = comparator or WeightedClaimComparator()

    def process(self, file_name: str, text: str) -> ProcessedClaim:
        claim = self._parser.parse(text)
        claim.file_name = file_name
        insured = self._roster_matcher.match(self._extractor.extract(text))
        logger.info(
            "%s: insured=%r id=%s confidence=%.2f",
            file_name,
            insured.insured_name,
            insured.internal_id,
            insured.confidence,
        )
        return ProcessedClaim(claim=claim, insured=insured)

    def run(self, documents: Iterable[tuple[str, str]]) -> PipelineResult:
        processed = [self.process(file_name, text) for file_name, text in documents]
        matches = self._comparator.find_related([item.claim for item in processed])
        return PipelineResult(processed=processed, matches=matches)
