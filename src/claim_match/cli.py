from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any

from claim_match.config import LLMConfig
from claim_match.datasets import SAMPLE_CLAIMS, sample_for_filename
from claim_match.models import ClaimMatch, PipelineResult
from claim_match.runners import LocalClaimPipeline
from claim_match.schema import MatchType
from claim_match.steps import RegexClaimParser, build_insured_extractor, match_insured

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format=LOG_FORMAT)

    if args.command == "match-insured":
        result = match_insured(args.name)
        print(json.dumps(asdict(result), indent=2))
        return

    if args.command == "compare":
        documents = _load_documents(parser, args.files, use_samples=args.use_samples)
        run_compare(
            documents=documents,
            output_dir=args.output_dir,
            config=LLMConfig.from_env(model=args.model),
        )
        return

    if args.command == "samples":
        write_samples(args.output_dir)
        return

    parser.print_help()


def run_compare(*, documents: list[tuple[str, str]], output_dir: Path, config: LLMConfig) -> PipelineResult:
    output_dir.mkdir(parents=True, exist_ok=True)

    pipeline = LocalClaimPipeline(
        parser=RegexClaimParser(),
        extractor=build_insured_extractor(config),
    )
    result = pipeline.run(documents)

    claims_path = output_dir / "claims.json"
    matches_path = output_dir / "matches.json"
    _write_json(claims_path, [asdict(item) for item in result.processed])
    _write_json(matches_path, [_match_payload(match) for match in result.matches])

    summary = _build_summary(result)
    print(f"Claims: {claims_path}")
    print(f"Matches: {matches_path}")
    print("---")
    for key, value in summary.items():
        print(f"{key}={value}")
    return result


def write_samples(output_dir: Path) -> list[Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for key, text in SAMPLE_CLAIMS.items():
        path = output_dir / f"{key}_claim.txt"
        path.write_text(text + "\n", encoding="utf-8")
        written.append(path)
        print(f"Wrote {path}")
    return written


def _build_summary(result: PipelineResult) -> dict[str, object]:
    matched = [item for item in result.processed if item.insured.internal_id]
    return {
        "documents": len(result.processed),
        "matched_insureds": len(matched),
        "unmatched_insureds": len(result.processed) - len(matched),
        "related_pairs": len(result.matches),
        "duplicate_pairs": sum(1 for match in result.matches if match.match_type is MatchType.DUPLICATE),
    }


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="claim-match", description="Insured matching and claim comparison CLI")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    subparsers = parser.add_subparsers(dest="command")

    match_parser = subparsers.add_parser("match-insured", help="Match a company name against the insured roster")
    match_parser.add_argument("name")

    compare_parser = subparsers.add_parser(
        "compare",
        help="Parse claim text files, resolve insureds and report related or duplicate claims",
    )
    compare_parser.add_argument("files", nargs="+", type=Path)
    compare_parser.add_argument("--output-dir", type=Path, default=Path("data/cli_output"))
    compare_parser.add_argument("--model", type=str, default=None)
    compare_parser.add_argument(
        "--use-samples",
        action="store_true",
        help="Substitute the built-in demo text for files named after a sample",
    )

    samples_parser = subparsers.add_parser("samples", help="Write the demo claim documents as text files")
    samples_parser.add_argument("--output-dir", type=Path, default=Path("data/samples"))

    return parser


def _load_documents(
    parser: argparse.ArgumentParser,
    paths: list[Path],
    *,
    use_samples: bool,
) -> list[tuple[str, str]]:
    documents: list[tuple[str, str]] = []
    for path in paths:
        sample = sample_for_filename(path.name) if use_samples else None
        if sample is not None:
            documents.append((path.name, sample))
            continue
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            parser.error(f"cannot read {path}: {exc}")
        documents.append((path.name, text))
    return documents


def _match_payload(match: ClaimMatch) -> dict[str, Any]:
    return {
        "file_a": match.claim_a.file_name,
        "file_b": match.claim_b.file_name,
        "match_score": round(match.match_score, 4),
        "match_type": match.match_type.value,
        "reasons": match.reasons,
    }


def _write_json(path: Path, payload: object) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)


if __name__ == "__main__":
    main()
