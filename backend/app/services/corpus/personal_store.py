from __future__ import annotations

import logging
import sqlite3
import uuid
from collections.abc import Iterable
from pathlib import Path
from typing import Literal

from app.db.migrations import get_connection
from app.services.corpus.index_builder import sentence_occurrences
from app.services.corpus.models import IndexEntry, Scope, Sentence, SentenceId


logger = logging.getLogger(__name__)

SentenceSource = Literal["manual", "project"]


class PersonalCorpusStore:
    """Per-user sentences and inverted index in SQLite.

    Every sentence append runs in a single transaction together with its index
    upserts. Entries left without sentence references are pruned whenever a
    sentence is deleted.
    """

    def __init__(self, db_path: Path):
        self.db_path = db_path

    def lookup(self, base_word: str, user_id: str) -> IndexEntry | None:
        if not base_word:
            return None
        with get_connection(self.db_path) as conn:
            row = conn.execute(
                """
                SELECT id, base_word
                FROM personal_index_entries
                WHERE user_id = ? AND base_word = ?
                """,
                (user_id, base_word),
            ).fetchone()
            if row is None:
                return None
            return self._entry_from_row(conn, row, user_id)

    def list_entries(self, user_id: str) -> list[IndexEntry]:
        with get_connection(self.db_path) as conn:
            rows = conn.execute(
                """
                SELECT id, base_word
                FROM personal_index_entries
                WHERE user_id = ?
                ORDER BY datetime(created_at) DESC, id DESC
                """,
                (user_id,),
            ).fetchall()
            return [self._entry_from_row(conn, row, user_id) for row in rows]

    def sentences_by_ids(self, sentence_ids: Iterable[SentenceId], user_id: str) -> list[Sentence]:
        requested = [sentence_id for sentence_id in sentence_ids if isinstance(sentence_id, str)]
        if not requested:
            return []

        unique_ids = list(dict.fromkeys(requested))
        placeholders = ", ".join("?" for _ in unique_ids)
        with get_connection(self.db_path) as conn:
            rows = conn.execute(
                f"""
                SELECT id, sentence, source, created_at
                FROM personal_sentences
                WHERE user_id = ? AND id IN ({placeholders})
                """,
                (user_id, *unique_ids),
            ).fetchall()

        by_id = {str(row["id"]): self._sentence_from_row(row, user_id) for row in rows}
        return [by_id[sentence_id] for sentence_id in requested if sentence_id in by_id]

    def list_sentences(self, user_id: str) -> list[Sentence]:
        with get_connection(self.db_path) as conn:
            rows = conn.execute(
                """
                SELECT id, sentence, source, created_at
                FROM personal_sentences
                WHERE user_id = ?
                ORDER BY datetime(created_at) DESC, rowid DESC
                """,
                (user_id,),
            ).fetchall()
        return [self._sentence_from_row(row, user_id) for row in rows]

    def count_sentences(self, user_id: str) -> int:
        with get_connection(self.db_path) as conn:
            row = conn.execute(
                "SELECT COUNT(*) AS total FROM personal_sentences WHERE user_id = ?",
                (user_id,),
            ).fetchone()
        return int(row["total"])

    def random_sentences(self, user_id: str, count: int) -> list[Sentence]:
        with get_connection(self.db_path) as conn:
            rows = conn.execute(
                """
                SELECT id, sentence, source, created_at
                FROM personal_sentences
                WHERE user_id = ?
                ORDER BY RANDOM()
                LIMIT ?
                """,
                (user_id, count),
            ).fetchall()
        return [self._sentence_from_row(row, user_id) for row in rows]

    def append_sentence(
        self,
        user_id: str,
        text: str,
        source: SentenceSource = "manual",
    ) -> Sentence:
        sentence_text = text.strip()
        if not sentence_text:
            raise ValueError("sentence is required")

        occurrences = sentence_occurrences(sentence_text)
        sentence_id = uuid.uuid4().hex

        with get_connection(self.db_path) as conn:
            conn.execute(
                """
                INSERT INTO personal_sentences (id, user_id, sentence, source)
                VALUES (?, ?, ?, ?)
                """,
                (sentence_id, user_id, sentence_text, source),
            )
            for base_word, variants in occurrences.items():
                conn.execute(
                    """
                    INSERT INTO personal_index_entries (user_id, base_word)
                    VALUES (?, ?)
                    ON CONFLICT(user_id, base_word) DO NOTHING
                    """,
                    (user_id, base_word),
                )
                entry_id = conn.execute(
                    """
                    SELECT id
                    FROM personal_index_entries
                    WHERE user_id = ? AND base_word = ?
                    """,
                    (user_id, base_word),
                ).fetchone()["id"]
                conn.executemany(
                    """
                    INSERT INTO personal_index_variants (entry_id, variant)
                    VALUES (?, ?)
                    ON CONFLICT(entry_id, variant) DO NOTHING
                    """,
                    [(entry_id, variant) for variant in variants],
                )
                conn.execute(
                    """
                    INSERT INTO personal_index_sentences (entry_id, sentence_id)
                    VALUES (?, ?)
                    ON CONFLICT(entry_id, sentence_id) DO NOTHING
                    """,
                    (entry_id, sentence_id),
                )
            row = conn.execute(
                "SELECT id, sentence, source, created_at FROM personal_sentences WHERE id = ?",
                (sentence_id,),
            ).fetchone()

        logger.info(
            "personal_sentence_appended",
            extra={"user_id": user_id, "sentence_id": sentence_id, "base_words": len(occurrences)},
        )
        return self._sentence_from_row(row, user_id)

    def delete_sentence(self, user_id: str, sentence_id: str) -> bool:
        with get_connection(self.db_path) as conn:
            conn.execute("BEGIN IMMEDIATE")
            cursor = conn.execute(
                "DELETE FROM personal_sentences WHERE id = ? AND user_id = ?",
                (sentence_id, user_id),
            )
            if cursor.rowcount == 0:
                return False
            pruned = self._prune_empty_entries(conn, user_id)

        logger.info(
            "personal_sentence_deleted",
            extra={"user_id": user_id, "sentence_id": sentence_id, "pruned_entries": pruned},
        )
        return True

    def delete_entry(self, user_id: str, base_word: str) -> int:
        with get_connection(self.db_path) as conn:
            # The write lock is held from the first read; appends wait until the delete commits.
            conn.execute("BEGIN IMMEDIATE")
            entry_row = conn.execute(
                """
                SELECT id
                FROM personal_index_entries
                WHERE user_id = ? AND base_word = ?
                """,
                (user_id, base_word),
            ).fetchone()
            if entry_row is None:
                raise LookupError(f"Entry '{base_word}' was not found")

            sentence_ids = [
                str(row["sentence_id"])
                for row in conn.execute(
                    "SELECT sentence_id FROM personal_index_sentences WHERE entry_id = ?",
                    (entry_row["id"],),
                ).fetchall()
            ]
            conn.executemany(
                "DELETE FROM personal_sentences WHERE id = ? AND user_id = ?",
                [(sentence_id, user_id) for sentence_id in sentence_ids],
            )
            conn.execute(
                "DELETE FROM personal_index_entries WHERE id = ?",
                (entry_row["id"],),
            )
            pruned = self._prune_empty_entries(conn, user_id)

        logger.info(
            "personal_entry_deleted",
            extra={
                "user_id": user_id,
                "base_word": base_word,
                "deleted_sentences": len(sentence_ids),
                "pruned_entries": pruned,
            },
        )
        return len(sentence_ids)

    def _prune_empty_entries(self, conn: sqlite3.Connection, user_id: str) -> int:
        cursor = conn.execute(
            """
            DELETE FROM personal_index_entries
            WHERE user_id = ?
              AND NOT EXISTS (
                SELECT 1
                FROM personal_index_sentences s
                WHERE s.entry_id = personal_index_entries.id
              )
            """,
            (user_id,),
        )
        return cursor.rowcount

    def _entry_from_row(self, conn: sqlite3.Connection, row: sqlite3.Row, user_id: str) -> IndexEntry:
        variants = conn.execute(
            "SELECT variant FROM personal_index_variants WHERE entry_id = ? ORDER BY rowid",
            (row["id"],),
        ).fetchall()
        sentence_ids = conn.execute(
            "SELECT sentence_id FROM personal_index_sentences WHERE entry_id = ? ORDER BY rowid",
            (row["id"],),
        ).fetchall()
        return IndexEntry(
            base_word=str(row["base_word"]),
            scope=Scope(user_id=user_id),
            variants=tuple(str(item["variant"]) for item in variants),
            sentence_ids=tuple(str(item["sentence_id"]) for item in sentence_ids),
        )

    def _sentence_from_row(self, row: sqlite3.Row, user_id: str) -> Sentence:
        return Sentence(
            id=str(row["id"]),
            text=str(row["sentence"]),
            scope=Scope(user_id=user_id),
            source=row["source"],
            created_at=row["created_at"],
        )
