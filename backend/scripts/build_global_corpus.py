"""Build the global corpus files from a plain-text corpus, one sentence per line.

Example:
    python scripts/build_global_corpus.py --input sentence_corpus.txt
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.core.config import load_settings
from app.core.logging import configure_logging
from app.services.corpus.global_store import write_global_corpus


logger = logging.getLogger("build_global_corpus")


def parse_args() -> argparse.Namespace:
    settings = load_settings()
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--input", type=Path, required=True, help="UTF-8 text file, one sentence per line")
    parser.add_argument(
        "--output",
        type=Path,
        default=settings.global_corpus_dir,
        help=f"Output directory (default: {settings.global_corpus_dir})",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=settings.sentence_chunk_size,
        help="Sentences per chunk file",
    )
    return parser.parse_args()


def main() -> int:
    configure_logging()
    args = parse_args()
    if not args.input.exists():
        logger.error("build_global_corpus_input_missing", extra={"input": str(args.input)})
        return 1

    with args.input.open(encoding="utf-8") as handle:
        summary = write_global_corpus(handle, args.output, chunk_size=args.chunk_size)

    print(json.dumps({"output": str(args.output), **summary}, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
