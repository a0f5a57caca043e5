from __future__ import annotations

import argparse
from pathlib import Path

from claim_match.datasets import SAMPLE_CLAIMS


def main() -> None:
    parser = argparse.ArgumentParser(description="Write the demo claim documents as text files")
    parser.add_argument("--output-dir", type=Path, default=Path("data/samples"))
    parser.add_argument("--only", choices=sorted(SAMPLE_CLAIMS), action="append", default=None)
    args = parser.parse_args()

    args.output_dir.mkdir(parents=True, exist_ok=True)
    for key in args.only or SAMPLE_CLAIMS:
        path = args.output_dir / f"{key}_claim.txt"
        with path.open("w", encoding="utf-8") as handle:
            handle.write(SAMPLE_CLAIMS[key] + "\n")


if __name__ == "__main__":
    main()
