from __future__ import annotations

from collections.abc import Sequence

from claim_match.models import ClaimMatch, ExtractedClaim
from claim_match.schema import DEFAULT_COMPARISON_SCHEMA, ComparisonSchema, MatchType
from claim_match.steps.distance import calculate_string_similarity

NO_SIMILARITIES = "No significant similarities found"


def compare_claims(
    claim_a: ExtractedClaim,
    claim_b: ExtractedClaim,
    schema: ComparisonSchema = DEFAULT_COMPARISON_SCHEMA,
) -> ClaimMatch:
    """Weighted field-by-field comparison of two claims.

    A field only counts towards the score when both sides carry a value that
    scores above zero, so sparse claims are judged on what they share.
    """
    reasons: list[str] = []
    total_score = 0.0
    total_weight = 0

    for rule in schema.rules:
        left = getattr(claim_a, rule.field.value)
        right = getattr(claim_b, rule.field.value)
        score = calculate_string_similarity(left, right)
        if score <= 0:
            continue
        total_score += score * rule.weight
        total_weight += rule.weight
        if score > rule.threshold:
            reasons.append(rule.describe(left, right))

    match_score = total_score / total_weight if total_weight else 0.0
    return ClaimMatch(
        claim_a=claim_a,
        claim_b=claim_b,
        match_score=match_score,
        match_type=schema.classify(match_score),
        reasons=reasons or [NO_SIMILARITIES],
    )


class WeightedClaimComparator:
    """Pairwise claim scanner keeping duplicate and related pairs."""

    def __init__(self, schema: ComparisonSchema = DEFAULT_COMPARISON_SCHEMA) -> None:
        self._schema = schema

    def compare(self, claim_a: ExtractedClaim, claim_b: ExtractedClaim) -> ClaimMatch:
        return compare_claims(claim_a, claim_b, schema=self._schema)

    def find_related(self, claims: Sequence[ExtractedClaim]) -> list[ClaimMatch]:
        matches: list[ClaimMatch] = []
        for i, left in enumerate(claims):
            for right in claims[i + 1 :]:
                match = self.compare(left, right)
                if match.match_type is not MatchType.DIFFERENT:
                    matches.append(match)
        return matches


def find_related_claims(claims: Sequence[ExtractedClaim]) -> list[ClaimMatch]:
    return WeightedClaimComparator().find_related(claims)
