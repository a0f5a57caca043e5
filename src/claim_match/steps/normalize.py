from __future__ import annotations

import re

CORPORATE_SUFFIXES: tuple[str, ...] = (
    " inc",
    " llc",
    " ltd",
    " corp",
    " co",
    " company",
    " group",
    " corporation",
    " incorporated",
    " limited",
)

_PUNCTUATION = re.compile(r"[^\w\s]")


def normalize_name(name: str | None) -> str:
    """Lowercase a company name and drop punctuation and trailing corporate suffixes.

    Suffixes are stripped until none remain, so ``"Global Trading Co., Ltd."``
    becomes ``"global trading"``. A suffix word that is not trailing
    (``"Group Therapy LLC"``) is kept.
    """
    if not name:
        return ""

    normalized = _PUNCTUATION.sub("", name.lower()).strip()

    stripped = True
    while stripped:
        stripped = False
        for suffix in CORPORATE_SUFFIXES:
            if normalized.endswith(suffix):
                normalized = normalized[: -len(suffix)].rstrip()
                stripped = True
                break

    return normalized
