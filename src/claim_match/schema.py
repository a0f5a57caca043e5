from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Sequence


class MatchType(StrEnum):
    DUPLICATE = "duplicate"
    RELATED = "related"
    DIFFERENT = "different"


class ClaimField(StrEnum):
    POLICY_NUMBER = "policy_number"
    CLAIM_NUMBER = "claim_number"
    INSURED_PARTY = "insured_party"
    INCIDENT_DATE = "incident_date"
    CLAIM_TYPE = "claim_type"
    ESTIMATED_AMOUNT = "estimated_amount"
    LOCATION = "location"
    DESCRIPTION = "description"
    ADJUSTER = "adjuster"


@dataclass(frozen=True)
class FieldRule:
    """How much one claim field counts and when it is reported as a match.

    ``reason`` is formatted with ``left`` and ``right`` (the two raw values).
    """

    field: ClaimField
    weight: int
    threshold: float
    reason: str

    def describe(self, left: str | None, right: str | None) -> str:
        return self.reason.format(left=left, right=right)


@dataclass(frozen=True)
class ComparisonSchema:
    """Ordered field rules plus the score cut-offs used to classify a pair."""

    rules: tuple[FieldRule, ...]
    duplicate_above: float = 0.8
    related_above: float = 0.5

    @classmethod
    def from_rules(cls, rules: Sequence[FieldRule], **cutoffs: float) -> "ComparisonSchema":
        return cls(rules=tuple(rules), **cutoffs)

    def classify(self, score: float) -> MatchType:
        if score > self.duplicate_above:
            return MatchType.DUPLICATE
        if score > self.related_above:
            return MatchType.RELATED
        return MatchType.DIFFERENT


DEFAULT_COMPARISON_SCHEMA = ComparisonSchema.from_rules(
    [
        FieldRule(ClaimField.POLICY_NUMBER, 3, 0.8, "Policy numbers match ({left} and {right})"),
        FieldRule(ClaimField.CLAIM_NUMBER, 3, 0.8, "Claim numbers match ({left} and {right})"),
        FieldRule(ClaimField.INSURED_PARTY, 2, 0.7, "Insured parties match ({left} and {right})"),
        FieldRule(ClaimField.INCIDENT_DATE, 2, 0.7, "Incident dates match ({left} and {right})"),
        FieldRule(ClaimField.LOCATION, 2, 0.7, "Locations match ({left} and {right})"),
        FieldRule(ClaimField.DESCRIPTION, 1, 0.6, "Descriptions contain similar content"),
    ]
)
