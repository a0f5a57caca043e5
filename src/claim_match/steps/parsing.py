from __future__ import annotations

import re

from claim_match.models import ExtractedClaim
from claim_match.schema import ClaimField

_FLAGS = re.IGNORECASE

# Identifiers must contain at least one digit so labels like "Policy Effective" are skipped.
_IDENTIFIER = r"([A-Z0-9-]*\d[A-Z0-9-]*)"

FIELD_PATTERNS: dict[ClaimField, tuple[re.Pattern[str], ...]] = {
    ClaimField.POLICY_NUMBER: (
        re.compile(r"\bpolicy(?:\s*(?:number|no\.?|#))?\s*:?\s*#?\s*" + _IDENTIFIER, _FLAGS),
    ),
    ClaimField.CLAIM_NUMBER: (
        re.compile(r"\bclaim(?:\s*(?:number|no\.?|#))?\s*:?\s*#?\s*" + _IDENTIFIER, _FLAGS),
        re.compile(r"\bref(?:erence)?\s*#?\s*:?\s*#?\s*" + _IDENTIFIER, _FLAGS),
        re.compile(r"(?:^|\s)#:\s*" + _IDENTIFIER, _FLAGS),
    ),
    ClaimField.INSURED_PARTY: (
        re.compile(r"\binsured(?:\s+(?:party|name))?\s*:\s*([^,\n.]+)", _FLAGS),
    ),
    ClaimField.INCIDENT_DATE: (
        re.compile(
            r"(?:date of loss|loss date|incident date|filed|date)\s*:?\s*"
            r"([A-Z]+ \d{1,2}(?:st|nd|rd|th)?,? \d{4}|\d{1,2}[/-]\d{1,2}[/-]\d{2,4})",
            _FLAGS,
        ),
    ),
    ClaimField.LOCATION: (
        re.compile(r"\b(?:location|address|property)\s*:[^\S\n]*\n?[^\S\n]*([^\n]+)", _FLAGS),
    ),
    ClaimField.ESTIMATED_AMOUNT: (
        re.compile(r"(?:estimated|damage|loss|amount)[^$\d\n]*\$\s*([\d,]+(?:\.\d{2})?)", _FLAGS),
        # Without a currency sign the figure has to follow the label directly.
        re.compile(r"(?:estimated|damage|loss|amount)[^\S\n]*:?[^\S\n]*\$?[^\S\n]*(\d[\d,]*(?:\.\d{2})?)", _FLAGS),
    ),
    ClaimField.CLAIM_TYPE: (
        re.compile(r"(?:claim type|type of (?:claim|loss)|incident type|\btype)\s*:\s*([^,\n.]+)", _FLAGS),
    ),
    ClaimField.DESCRIPTION: (
        re.compile(
            r"(?:description|incident summary|summary)\s*:\s*(.+?)(?=\n\s*\n|\n[A-Z][\w ]{0,30}:|\Z)",
            _FLAGS | re.DOTALL,
        ),
    ),
    ClaimField.ADJUSTER: (
        re.compile(r"\b(?:adjuster|inspector|analyst)\s*:\s*([^,\n(]+)", _FLAGS),
    ),
}

# Number of fields a well-formed claim is expected to yield.
EXPECTED_FIELD_COUNT = 8


class RegexClaimParser:
    """Pulls claim fields out of raw document text with per-field patterns."""

    def __init__(self, patterns: dict[ClaimField, tuple[re.Pattern[str], ...]] | None = None) -> None:
        self._patterns = patterns or FIELD_PATTERNS

    def parse(self, text: str) -> ExtractedClaim:
        claim = ExtractedClaim()
        if not text:
            return claim

        found = 0
        for field, patterns in self._patterns.items():
            value = _first_capture(patterns, text)
            if value:
                setattr(claim, field.value, value)
                found += 1

        claim.confidence = min(found / EXPECTED_FIELD_COUNT, 1.0)
        return claim


def parse_claim_text(text: str) -> ExtractedClaim:
    return RegexClaimParser().parse(text)


def _first_capture(patterns: tuple[re.Pattern[str], ...], text: str) -> str | None:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            value = " ".join(match.group(1).split())
            if value:
                return value
    return None
