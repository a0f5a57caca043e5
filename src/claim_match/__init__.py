"""Insured-name matching and claim comparison."""

from claim_match.datasets import INSUREDS
from claim_match.models import ClaimMatch, ExtractedClaim, MatchResult, RosterEntry
from claim_match.runners import LocalClaimPipeline
from claim_match.schema import ClaimField, MatchType
from claim_match.steps import (
    FallbackInsuredExtractor,
    GeminiInsuredExtractor,
    RegexInsuredExtractor,
    calculate_string_similarity,
    compare_claims,
    find_related_claims,
    levenshtein,
    match_insured,
    normalize_name,
    parse_claim_text,
    select_insured,
)

__all__ = [
    "INSUREDS",
    "ClaimMatch",
    "ExtractedClaim",
    "MatchResult",
    "RosterEntry",
    "LocalClaimPipeline",
    "ClaimField",
    "MatchType",
    "FallbackInsuredExtractor",
    "GeminiInsuredExtractor",
    "RegexInsuredExtractor",
    "calculate_string_similarity",
    "compare_claims",
    "find_related_claims",
    "levenshtein",
    "match_insured",
    "normalize_name",
    "parse_claim_text",
    "select_insured",
]
