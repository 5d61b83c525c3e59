from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.core.config import Settings, load_settings
from app.core.logging import configure_logging
from app.db.migrations import apply_migrations
from app.services.corpus.global_store import GlobalCorpusStore
from app.services.corpus.personal_store import PersonalCorpusStore
from app.services.corpus.store import CorpusStore

configure_logging()
logger = logging.getLogger(__name__)


def _default_global_store_factory(settings: Settings) -> GlobalCorpusStore:
    return GlobalCorpusStore(settings.global_corpus_dir)


def create_app(
    settings: Settings | None = None,
    global_store_factory: Callable[[Settings], GlobalCorpusStore] = _default_global_store_factory,
) -> FastAPI:
    app_settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        applied: list[str] = []

        try:
            app_settings.db_path.parent.mkdir(parents=True, exist_ok=True)
            applied = apply_migrations(app_settings.db_path)
            app.state.db_ready = True
            app.state.db_error = None
        except Exception as exc:
            app.state.db_ready = False
            app.state.db_error = str(exc)
            logger.exception(
                "backend_db_startup_failed",
                extra={"db_path": str(app_settings.db_path)},
            )

        try:
            global_store = global_store_factory(app_settings)
        except Exception as exc:
            logger.exception(
                "backend_global_corpus_startup_failed",
                extra={"global_corpus_dir": str(app_settings.global_corpus_dir)},
            )
            global_store = GlobalCorpusStore(app_settings.global_corpus_dir / "__unavailable__")
            app.state.global_corpus_error = str(exc)
        else:
            app.state.global_corpus_error = (
                None
                if global_store.available
                else f"Global corpus not found in {app_settings.global_corpus_dir}"
            )
        app.state.global_corpus_ready = global_store.available

        # Analysis still runs against personal corpora when the global corpus is missing.
        app.state.corpus_store = CorpusStore(
            global_store=global_store,
            personal_store=PersonalCorpusStore(app_settings.db_path),
        )

        startup_status = (
            "ok" if app.state.db_ready and app.state.global_corpus_ready else "degraded"
        )
        logger.info(
            "backend_startup",
            extra={
                "status": startup_status,
                "environment": app_settings.environment,
                "db_path": str(app_settings.db_path),
                "global_corpus_dir": str(app_settings.global_corpus_dir),
                "global_sentences": global_store.sentence_count,
                "host": app_settings.host,
                "port": app_settings.port,
                "applied_migrations": applied,
                "db_error": app.state.db_error,
                "global_corpus_error": app.state.global_corpus_error,
            },
        )
        yield

    app = FastAPI(title="Jecha Backend", version="0.1.0", lifespan=lifespan)
    app.state.settings = app_settings
    app.state.db_ready = False
    app.state.db_error = None
    app.state.global_corpus_ready = False
    app.state.global_corpus_error = None
    app.state.corpus_store = None
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(app_settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
