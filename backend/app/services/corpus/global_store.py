from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from app.core.config import DEFAULT_SENTENCE_CHUNK_SIZE
from app.services.corpus.cache import LRUCache
from app.services.corpus.index_builder import IndexBuilder, shard_key
from app.services.corpus.models import GLOBAL_SCOPE, IndexEntry, Sentence, SentenceId


logger = logging.getLogger(__name__)

METADATA_FILE = "metadata.json"


def sentence_chunk_file(chunk: int) -> str:
    return f"sentences_{chunk}.json"


def index_shard_file(key: str) -> str:
    return f"index_{key}.json"


@dataclass(frozen=True)
class GlobalCorpusMetadata:
    total_sentences: int
    sentence_chunk_size: int
    num_sentence_chunks: int
    index_shards: tuple[str, ...] = ()

    def locate(self, sentence_id: int) -> tuple[int, int]:
        return divmod(sentence_id, self.sentence_chunk_size)


EMPTY_METADATA = GlobalCorpusMetadata(
    total_sentences=0,
    sentence_chunk_size=DEFAULT_SENTENCE_CHUNK_SIZE,
    num_sentence_chunks=0,
)


class GlobalCorpusStore:
    """Read-only view over a global corpus written by `write_global_corpus`.

    The corpus directory holds `metadata.json`, fixed-size sentence chunks
    (`sentences_<n>.json`, JSON arrays of strings) and index shards keyed by the
    first letter of the base word (`index_<key>.json`, objects mapping a base
    word to its `variants` and `sentence_ids`).

    Unreadable chunks or shards are logged and treated as empty, so one damaged
    file never fails a whole lookup. Failed reads are not cached and are retried
    on the next access.
    """

    def __init__(self, corpus_dir: Path, cache_size: int = 64):
        self.corpus_dir = corpus_dir
        self._shards = LRUCache[str, dict[str, object]](max_size=cache_size)
        self._chunks = LRUCache[int, list[str]](max_size=cache_size)
        self.metadata = self._load_metadata()

    @property
    def available(self) -> bool:
        return self.metadata is not EMPTY_METADATA

    @property
    def sentence_count(self) -> int:
        return self.metadata.total_sentences

    def lookup(self, base_word: str) -> IndexEntry | None:
        if not base_word or not self.available:
            return None
        key = shard_key(base_word)
        if self.metadata.index_shards and key not in self.metadata.index_shards:
            return None
        shard = self._shards.get_or_load(key, self._load_shard) or {}
        raw_entry = shard.get(base_word)
        if raw_entry is None:
            return None
        try:
            return IndexEntry(
                base_word=base_word,
                scope=GLOBAL_SCOPE,
                variants=tuple(str(variant) for variant in raw_entry["variants"]),
                sentence_ids=tuple(int(sentence_id) for sentence_id in raw_entry["sentence_ids"]),
            )
        except (KeyError, TypeError, ValueError):
            logger.warning(
                "global_corpus_entry_malformed",
                extra={"base_word": base_word, "shard": shard_key(base_word)},
            )
            return None

    def sentences_by_ids(self, sentence_ids: Iterable[SentenceId]) -> list[Sentence]:
        sentences: list[Sentence] = []
        chunks: dict[int, list[str]] = {}
        for sentence_id in sentence_ids:
            if not isinstance(sentence_id, int) or isinstance(sentence_id, bool):
                continue
            if not 0 <= sentence_id < self.metadata.total_sentences:
                continue
            chunk, offset = self.metadata.locate(sentence_id)
            if chunk not in chunks:
                chunks[chunk] = self._chunks.get_or_load(chunk, self._load_chunk) or []
            chunk_sentences = chunks[chunk]
            if offset >= len(chunk_sentences):
                continue
            sentences.append(
                Sentence(id=sentence_id, text=chunk_sentences[offset], scope=GLOBAL_SCOPE)
            )
        return sentences

    def _load_metadata(self) -> GlobalCorpusMetadata:
        payload = self._read_json(self.corpus_dir / METADATA_FILE, "global_corpus_metadata_unreadable")
        if not isinstance(payload, dict):
            return EMPTY_METADATA
        try:
            metadata = GlobalCorpusMetadata(
                total_sentences=int(payload["total_sentences"]),
                sentence_chunk_size=int(payload["sentence_chunk_size"]),
                num_sentence_chunks=int(payload["num_sentence_chunks"]),
                index_shards=tuple(payload.get("index_shards", ())),
            )
        except (KeyError, TypeError, ValueError):
            logger.warning(
                "global_corpus_metadata_unreadable",
                extra={"corpus_dir": str(self.corpus_dir)},
            )
            return EMPTY_METADATA
        if metadata.sentence_chunk_size <= 0:
            logger.warning(
                "global_corpus_metadata_unreadable",
                extra={"corpus_dir": str(self.corpus_dir), "sentence_chunk_size": metadata.sentence_chunk_size},
            )
            return EMPTY_METADATA
        return metadata

    def _load_shard(self, key: str) -> dict[str, object] | None:
        payload = self._read_json(self.corpus_dir / index_shard_file(key), "global_corpus_shard_unreadable")
        return payload if isinstance(payload, dict) else None

    def _load_chunk(self, chunk: int) -> list[str] | None:
        payload = self._read_json(self.corpus_dir / sentence_chunk_file(chunk), "global_corpus_chunk_unreadable")
        if not isinstance(payload, list):
            return None
        return [str(sentence) for sentence in payload]

    def _read_json(self, path: Path, event: str) -> object | None:
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.warning(event, extra={"path": str(path), "reason": "missing"})
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning(event, extra={"path": str(path), "reason": str(exc)})
        return None


def write_global_corpus(
    sentences: Iterable[str],
    output_dir: Path,
    chunk_size: int = DEFAULT_SENTENCE_CHUNK_SIZE,
) -> dict[str, object]:
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    all_sentences = [sentence.rstrip("\r\n") for sentence in sentences if sentence.strip()]
    output_dir.mkdir(parents=True, exist_ok=True)
    for stale in (*output_dir.glob("sentences_*.json"), *output_dir.glob("index_*.json")):
        stale.unlink()

    chunks = _chunked(all_sentences, chunk_size)
    for chunk, chunk_sentences in enumerate(chunks):
        _write_json(output_dir / sentence_chunk_file(chunk), chunk_sentences)

    builder = IndexBuilder(GLOBAL_SCOPE)
    for sentence_id, sentence in enumerate(all_sentences):
        builder.add_sentence(sentence_id, sentence)

    shards: dict[str, dict[str, dict[str, list[object]]]] = {}
    for entry in builder.entries():
        shards.setdefault(shard_key(entry.base_word), {})[entry.base_word] = {
            "variants": list(entry.variants),
            "sentence_ids": list(entry.sentence_ids),
        }
    for key, shard in shards.items():
        _write_json(output_dir / index_shard_file(key), shard)

    metadata = {
        "total_sentences": len(all_sentences),
        "sentence_chunk_size": chunk_size,
        "num_sentence_chunks": len(chunks),
        "index_shards": sorted(shards),
    }
    _write_json(output_dir / METADATA_FILE, metadata)
    logger.info(
        "global_corpus_written",
        extra={"output_dir": str(output_dir), "base_words": len(builder), **metadata},
    )
    return {**metadata, "base_words": len(builder)}


def _chunked(items: Sequence[str], size: int) -> list[list[str]]:
    return [list(items[start:start + size]) for start in range(0, len(items), size)]


def _write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
