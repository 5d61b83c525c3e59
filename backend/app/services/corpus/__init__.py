from app.services.corpus.analyzer import CorpusAnalyzer
from app.services.corpus.global_store import GlobalCorpusStore, write_global_corpus
from app.services.corpus.index_builder import IndexBuilder, build_index
from app.services.corpus.models import (
    GLOBAL_SCOPE,
    IndexEntry,
    Scope,
    Sentence,
    UnauthorizedError,
    WordAnalysis,
)
from app.services.corpus.normalization import normalize
from app.services.corpus.personal_store import PersonalCorpusStore
from app.services.corpus.store import CorpusStore

__all__ = [
    "CorpusAnalyzer",
    "CorpusStore",
    "GlobalCorpusStore",
    "PersonalCorpusStore",
    "IndexBuilder",
    "IndexEntry",
    "Scope",
    "Sentence",
    "WordAnalysis",
    "UnauthorizedError",
    "GLOBAL_SCOPE",
    "build_index",
    "normalize",
    "write_global_corpus",
]
