from __future__ import annotations

from pathlib import Path

from app.core.config import DEFAULT_SENTENCE_CHUNK_SIZE
from app.services.corpus.global_store import METADATA_FILE, write_global_corpus

SAMPLE_GLOBAL_SENTENCES: tuple[str, ...] = (
    "Akkam jirta?",
    "Maqaan koo Caaltuu dha.",
    "Ani barnoota barbaada.",
    "Guyyaan har'aa gaarii dha.",
    "Nyaata mi'aawaa nyaadhe.",
)


def seed_sample_global_corpus(
    corpus_dir: Path,
    chunk_size: int = DEFAULT_SENTENCE_CHUNK_SIZE,
) -> dict[str, object]:
    if (corpus_dir / METADATA_FILE).exists():
        return {"seeded": False, "corpus_dir": str(corpus_dir)}

    summary = write_global_corpus(SAMPLE_GLOBAL_SENTENCES, corpus_dir, chunk_size=chunk_size)
    return {"seeded": True, "corpus_dir": str(corpus_dir), **summary}
