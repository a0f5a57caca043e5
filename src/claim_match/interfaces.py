from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from claim_match.models import ClaimMatch, ExtractedClaim, PipelineResult


class ClaimParser(Protocol):
    """Step 1: turn raw document text into structured claim fields."""

    def parse(self, text: str) -> ExtractedClaim:
        ...


class InsuredExtractor(Protocol):
    """Step 2: pull the primary insured entity name out of document text."""

    def extract(self, text: str) -> str:
        ...


class ClaimComparator(Protocol):
    """Step 3: score claim pairs and keep the ones worth reviewing."""

    def compare(self, claim_a: ExtractedClaim, claim_b: ExtractedClaim) -> ClaimMatch:
        ...

    def find_related(self, claims: Sequence[ExtractedClaim]) -> list[ClaimMatch]:
        ...


class ClaimPipeline(Protocol):
    """Unified pipeline interface over a batch of ``(file_name, text)`` documents."""

    def run(self, documents: Iterable[tuple[str, str]]) -> PipelineResult:
        ...
