from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os


BASE_DIR = Path(__file__).resolve().parents[2]
DATA_DIR = BASE_DIR / "data"
DEFAULT_CORS_ORIGINS = ("http://127.0.0.1:3000", "http://localhost:3000")
DEFAULT_SENTENCE_CHUNK_SIZE = 10_000


@dataclass(frozen=True)
class Settings:
    environment: str
    app_name: str
    host: str
    port: int
    db_path: Path
    global_corpus_dir: Path
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    variant_suggestion_limit: int = 5
    single_sentence_limit: int = 10
    overlap_limit: int = 10
    sentence_chunk_size: int = DEFAULT_SENTENCE_CHUNK_SIZE


def load_settings() -> Settings:
    db_path = Path(os.getenv("JECHA_DB_PATH", DATA_DIR / "jecha.sqlite3"))
    global_corpus_dir = Path(os.getenv("JECHA_GLOBAL_CORPUS_DIR", DATA_DIR / "global_corpus"))
    raw_cors_origins = os.getenv("JECHA_CORS_ORIGINS", "")
    parsed_cors_origins = tuple(
        origin.strip()
        for origin in raw_cors_origins.split(",")
        if origin.strip()
    )
    return Settings(
        environment=os.getenv("JECHA_ENV", "development"),
        app_name=os.getenv("JECHA_APP_NAME", "jecha-backend"),
        host=os.getenv("JECHA_HOST", "127.0.0.1"),
        port=int(os.getenv("JECHA_PORT", "8000")),
        db_path=db_path,
        global_corpus_dir=global_corpus_dir,
        cors_origins=parsed_cors_origins or DEFAULT_CORS_ORIGINS,
        variant_suggestion_limit=int(os.getenv("JECHA_VARIANT_SUGGESTION_LIMIT", "5")),
        single_sentence_limit=int(os.getenv("JECHA_SINGLE_SENTENCE_LIMIT", "10")),
        overlap_limit=int(os.getenv("JECHA_OVERLAP_LIMIT", "10")),
        sentence_chunk_size=int(
            os.getenv("JECHA_SENTENCE_CHUNK_SIZE", str(DEFAULT_SENTENCE_CHUNK_SIZE))
        ),
    )
