from __future__ import annotations

import sqlite3

import pytest

from app.services.corpus.analyzer import CorpusAnalyzer
from app.services.corpus.models import Scope, UnauthorizedError
from app.services.corpus.personal_store import PersonalCorpusStore
from app.services.corpus.store import CorpusStore


def _statuses(analyses) -> list[tuple[str, str]]:
    return [(analysis.word, analysis.status) for analysis in analyses]


def test_attested_spellings_are_correct(analyzer) -> None:
    analyses = analyzer.analyze_sentence("Hoorraa guddaa qabna.", "user-1")

    assert _statuses(analyses) == [("Hoorraa", "correct"), ("guddaa", "correct"), ("qabna", "correct")]
    assert [analysis.base_word for analysis in analyses] == ["hora", "guda", "qabna"]
    assert all(analysis.suggestions == () for analysis in analyses)


def test_same_base_word_with_other_spelling_is_variant(store_factory) -> None:
    analyzer = CorpusAnalyzer(store_factory(["hooraa"]))

    (analysis,) = analyzer.analyze_sentence("hora", "user-1")

    assert analysis.status == "variant"
    assert analysis.base_word == "hora"
    assert analysis.suggestions == ("hooraa",)


def test_literal_match_is_case_sensitive(analyzer) -> None:
    (analysis,) = analyzer.analyze_sentence("hoorraa", "user-1")

    assert analysis.status == "variant"
    assert analysis.suggestions == ("Hoorraa",)


def test_unseen_base_word_is_unknown_without_suggestions(analyzer) -> None:
    (analysis,) = analyzer.analyze_sentence("Xiqqaa", "user-1")

    assert analysis.status == "unknown"
    assert analysis.suggestions == ()


def test_positions_follow_input_tokens_and_skip_punctuation(analyzer) -> None:
    analyses = analyzer.analyze_sentence("Akkam ... jirta ?", "user-1")

    assert [(analysis.word, analysis.position) for analysis in analyses] == [("Akkam", 0), ("jirta", 2)]


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_empty_input_returns_empty_analysis(analyzer, text: str) -> None:
    assert analyzer.analyze_sentence(text, "user-1") == []


@pytest.mark.parametrize("user_id", [None, "", "   "])
def test_missing_user_is_rejected(analyzer, user_id) -> None:
    with pytest.raises(UnauthorizedError):
        analyzer.analyze_sentence("Hoorraa", user_id)


def test_sentence_is_correct_right_after_it_is_added(corpus_store, analyzer) -> None:
    text = "Barreessaan (haaraa) barruu gaarii barreesse!"
    corpus_store.append_sentence(Scope.for_user("user-1"), text)

    analyses = analyzer.analyze_sentence(text, "user-1")

    assert len(analyses) == 5
    assert {analysis.status for analysis in analyses} == {"correct"}


def test_personal_entries_are_not_visible_to_other_users(corpus_store, analyzer) -> None:
    corpus_store.append_sentence(Scope.for_user("user-x"), "qubee")

    assert analyzer.analyze_sentence("qubee", "user-x")[0].status == "correct"
    assert analyzer.analyze_sentence("qubee", "user-y")[0].status == "unknown"
    assert corpus_store.lookup_across_scopes("qube", Scope.for_user("user-y")) == []


def test_personal_and_global_variants_are_merged(corpus_store) -> None:
    corpus_store.append_sentence(Scope.for_user("user-1"), "hooraa")
    analyzer = CorpusAnalyzer(corpus_store, variant_suggestion_limit=5)

    (analysis,) = analyzer.analyze_sentence("hora", "user-1")

    assert analysis.status == "variant"
    assert analysis.suggestions == ("Hoorraa", "hooraa")


def test_variant_suggestions_are_capped(store_factory) -> None:
    analyzer = CorpusAnalyzer(
        store_factory(["hoora hooraa hoorraa Hoorraa Hooraa"]),
        variant_suggestion_limit=2,
    )

    (analysis,) = analyzer.analyze_sentence("hora", "user-1")

    assert analysis.suggestions == ("hoora", "hooraa")


def test_suggestions_can_be_omitted(analyzer) -> None:
    (analysis,) = analyzer.analyze_sentence("hoorraa", "user-1", include_suggestions=False)

    assert analysis.status == "variant"
    assert analysis.suggestions == ()


class _FlakyPersonalStore(PersonalCorpusStore):
    def lookup(self, base_word: str, user_id: str):
        if base_word == "qube":
            raise sqlite3.OperationalError("database is locked")
        return super().lookup(base_word, user_id)


def test_lookup_failure_degrades_only_the_failing_scope(corpus_store) -> None:
    corpus_store.append_sentence(Scope.for_user("user-1"), "qubee nagaa")
    flaky = CorpusStore(
        global_store=corpus_store.global_store,
        personal_store=_FlakyPersonalStore(corpus_store.personal_store.db_path),
    )

    analyses = CorpusAnalyzer(flaky).analyze_sentence("Hoorraa qubee nagaa", "user-1")

    assert _statuses(analyses) == [("Hoorraa", "correct"), ("qubee", "unknown"), ("nagaa", "correct")]


class _UnavailablePersonalStore(PersonalCorpusStore):
    def lookup(self, base_word: str, user_id: str):
        raise sqlite3.OperationalError("unable to open database file")

    def sentences_by_ids(self, sentence_ids, user_id: str):
        raise sqlite3.OperationalError("unable to open database file")


def test_unavailable_personal_store_still_serves_global_results(corpus_store) -> None:
    store = CorpusStore(
        global_store=corpus_store.global_store,
        personal_store=_UnavailablePersonalStore(corpus_store.personal_store.db_path),
    )
    analyzer = CorpusAnalyzer(store)

    analyses = analyzer.analyze_sentence("Hoorraa hora", "user-1")
    single = analyzer.get_suggestions(["guddaa"], "single", "user-1")
    overlap = analyzer.get_suggestions(["Akkam", "jirta"], "overlap", "user-1")

    assert _statuses(analyses) == [("Hoorraa", "correct"), ("hora", "variant")]
    assert single.items == ("Hoorraa guddaa qabna.",)
    assert [(item.sentence, item.overlap) for item in overlap.items] == [("Akkam jirta?", 2)]
