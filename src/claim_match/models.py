from __future__ import annotations

from dataclasses import dataclass, field

from claim_match.schema import MatchType


@dataclass(frozen=True, slots=True)
class RosterEntry:
    """A known insured entity with a stable identifier."""

    internal_id: str
    name: str


@dataclass(slots=True)
class ExtractedClaim:
    """Fields pulled out of a single claim document."""

    policy_number: str | None = None
    claim_number: str | None = None
    insured_party: str | None = None
    incident_date: str | None = None
    claim_type: str | None = None
    estimated_amount: str | None = None
    location: str | None = None
    description: str | None = None
    adjuster: str | None = None
    confidence: float = 0.0
    file_name: str | None = None


@dataclass(slots=True)
class MatchResult:
    """Outcome of matching an extracted insured name against the roster."""

    insured_name: str
    internal_id: str | None = None
    confidence: float = 0.0

    @property
    def matched(self) -> bool:
        return self.internal_id is not None


@dataclass(slots=True)
class ClaimMatch:
    """A scored pair of claims with the reasons behind the score."""

    claim_a: ExtractedClaim
    claim_b: ExtractedClaim
    match_score: float
    match_type: MatchType
    reasons: list[str] = field(default_factory=list)


@dataclass(slots=True)
class ProcessedClaim:
    """A parsed claim together with its resolved insured."""

    claim: ExtractedClaim
    insured: MatchResult


@dataclass(slots=True)
class PipelineResult:
    processed: list[ProcessedClaim]
    matches: list[ClaimMatch]
