from __future__ import annotations

from pathlib import Path

import pytest

from app.core.config import Settings
from app.db.migrations import apply_migrations
from app.services.corpus.analyzer import CorpusAnalyzer
from app.services.corpus.global_store import GlobalCorpusStore, write_global_corpus
from app.services.corpus.personal_store import PersonalCorpusStore
from app.services.corpus.store import CorpusStore


GLOBAL_SENTENCES = (
    "Hoorraa guddaa qabna.",
    "Barataan kitaaba dubbisa.",
    "Akkam jirta?",
    "Nyaata mi'aawaa nyaadhe.",
)


def make_settings(tmp_path: Path, **overrides) -> Settings:
    values = {
        "environment": "test",
        "app_name": "jecha-backend-test",
        "host": "127.0.0.1",
        "port": 8001,
        "db_path": tmp_path / "jecha.sqlite3",
        "global_corpus_dir": tmp_path / "global_corpus",
    }
    values.update(overrides)
    return Settings(**values)


def build_store(tmp_path: Path, sentences=GLOBAL_SENTENCES, chunk_size: int = 2) -> CorpusStore:
    corpus_dir = tmp_path / "global_corpus"
    write_global_corpus(sentences, corpus_dir, chunk_size=chunk_size)
    db_path = tmp_path / "jecha.sqlite3"
    apply_migrations(db_path)
    return CorpusStore(
        global_store=GlobalCorpusStore(corpus_dir),
        personal_store=PersonalCorpusStore(db_path),
    )


@pytest.fixture
def corpus_store(tmp_path) -> CorpusStore:
    return build_store(tmp_path)


@pytest.fixture
def analyzer(corpus_store) -> CorpusAnalyzer:
    return CorpusAnalyzer(corpus_store)


@pytest.fixture
def settings_with_corpus(tmp_path) -> Settings:
    write_global_corpus(GLOBAL_SENTENCES, tmp_path / "global_corpus", chunk_size=2)
    return make_settings(tmp_path)


@pytest.fixture
def store_factory(tmp_path):
    return lambda sentences=GLOBAL_SENTENCES: build_store(tmp_path, sentences=sentences)


@pytest.fixture
def settings_factory(tmp_path):
    return lambda **overrides: make_settings(tmp_path, **overrides)
