from __future__ import annotations

import logging
import re
from typing import Literal

from claim_match.config import LLMConfig
from claim_match.interfaces import InsuredExtractor

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert insurance-claim analyst. Return ONLY the primary insured entity's name "
    "from the supplied text. Respond with a raw string and no additional words."
)

ExtractionMethod = Literal["llm", "regex-fallback", "none"]

_INSURED_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"policy\s*holder:\s*([^,\n.]+)",
        r"policyholder\s*information:[\s\S]*?insured:\s*([^,\n.]+)",
        r"insured(?:\s+party|\s+name|\s+)?:?\s*([^,\n.]+)",
        r"(?:^|\s)insured:?\s*([^,\n.]+)",
        r"(?:^|\s)(?:client|customer|policyholder):?\s*([^,\n.]+)",
        r"ownership.*?includes\s+([^,\n.]+)",
        r"refer\s+to\s+([^,\n.]+)\s+as.*?(?:primary|account holder)",
    )
)
_HEADER_LINE = re.compile(r"^(date|policy|claim|incident|reference|submitted|filed)", re.IGNORECASE)
_COMPANY_NAME = re.compile(r"(?:[A-Z][a-z]+ )+(?:LLC|Inc\.|Corp\.?|Ltd\.?|Company|Group|Partners)")


class ExtractionError(RuntimeError):
    """Raised when an extractor cannot produce an insured name."""


class RegexInsuredExtractor:
    """Heuristic insured-name extractor used when no LLM is available."""

    def extract(self, text: str) -> str:
        for pattern in _INSURED_PATTERNS:
            match = pattern.search(text)
            if match and match.group(1):
                candidate = match.group(1).strip()
                if len(candidate) > 3:
                    return candidate

        lines = text.split("\n")
        for line in lines:
            if len(line) < 10 or _HEADER_LINE.match(line):
                continue
            company = _COMPANY_NAME.search(line)
            if company:
                return company.group(0)
            stripped = line.strip()
            if len(line) > 15 and any(ch.isupper() for ch in line) and not stripped[:1].isdigit():
                return stripped

        first_line = lines[0].strip() if lines else ""
        doc_type = first_line if len(first_line) > 5 else "Document"
        return f"{doc_type} {' '.join(text[:20].split())}".strip()


class GeminiInsuredExtractor:
    """Google Gemini adapter returning the insured name as raw text."""

    def __init__(self, config: LLMConfig, system_prompt: str = SYSTEM_PROMPT) -> None:
        self._config = config
        self._system_prompt = system_prompt
        try:
            import google.generativeai as genai
        except ImportError as exc:
            raise ImportError(
                "Gemini backend requires google-generativeai. "
                "Install with: pip install 'claim-match[llm]'"
            ) from exc
        genai.configure(api_key=config.api_key)
        self._model = genai.GenerativeModel(config.model)

    def extract(self, text: str) -> str:
        logger.debug("Sending %d chars to %s", len(text), self._config.model)
        response = self._model.generate_content(
            f"{self._system_prompt}\n\nText: {text}",
            generation_config={
                "temperature": self._config.temperature,
                "max_output_tokens": self._config.max_output_tokens,
            },
        )
        name = (response.text or "").strip()
        if not name:
            raise ExtractionError(f"{self._config.model} returned an empty insured name")
        return name


class FallbackInsuredExtractor:
    """Try a primary extractor and fall back to another one on any failure."""

    def __init__(self, primary: InsuredExtractor, fallback: InsuredExtractor) -> None:
        self._primary = primary
        self._fallback = fallback
        self.last_method: ExtractionMethod = "none"

    def extract(self, text: str) -> str:
        try:
            name = self._primary.extract(text)
            self.last_method = "llm"
        except Exception as exc:
            logger.warning("LLM extraction failed, using regex fallback: %s", exc)
            name = self._fallback.extract(text)
            self.last_method = "regex-fallback"
        logger.info("Extracted insured %r via %s", name, self.last_method)
        return name


def build_insured_extractor(config: LLMConfig | None = None) -> InsuredExtractor:
    config = config or LLMConfig.from_env()
    if not config.enabled:
        logger.info("No Gemini API key configured, using regex extraction")
        return RegexInsuredExtractor()
    return FallbackInsuredExtractor(primary=GeminiInsuredExtractor(config), fallback=RegexInsuredExtractor())
