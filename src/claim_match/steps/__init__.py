from claim_match.steps.comparison import WeightedClaimComparator, compare_claims, find_related_claims
from claim_match.steps.distance import calculate_string_similarity, levenshtein
from claim_match.steps.extraction import (
    ExtractionError,
    FallbackInsuredExtractor,
    GeminiInsuredExtractor,
    RegexInsuredExtractor,
    build_insured_extractor,
)
from claim_match.steps.normalize import normalize_name
from claim_match.steps.parsing import RegexClaimParser, parse_claim_text
from claim_match.steps.roster import RosterMatcher, match_insured, select_insured

__all__ = [
    "WeightedClaimComparator",
    "compare_claims",
    "find_related_claims",
    "calculate_string_similarity",
    "levenshtein",
    "ExtractionError",
    "FallbackInsuredExtractor",
    "GeminiInsuredExtractor",
    "RegexInsuredExtractor",
    "build_insured_extractor",
    "normalize_name",
    "RegexClaimParser",
    "parse_claim_text",
    "RosterMatcher",
    "match_insured",
    "select_insured",
]
