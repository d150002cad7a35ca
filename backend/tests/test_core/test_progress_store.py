"""
Tests for the ProgressStore.
"""
import pytest
from unittest.mock import MagicMock

from wordwise.core.progress_store import ProgressEventKind, ProgressStore


class TestSeededStore:
    """Tests for the demo seed"""

    def test_words_to_learn_excludes_learned(self, store, catalog):
        to_learn = [w.word for w in store.words_to_learn]
        assert len(catalog) == 7
        assert len(to_learn) == 6
        assert "Benevolent" not in to_learn

    def test_words_to_learn_keeps_catalog_order(self, store, catalog):
        expected = [w.word for w in catalog if w.word != "Benevolent"]
        assert [w.word for w in store.words_to_learn] == expected

    def test_seed_progress(self, store):
        progress = store.progress
        assert progress.words_learned == 1
        assert progress.accuracy == 83
        assert progress.rank.name == "Bronze"

    def test_seed_bookmarks(self, store):
        assert [w.word for w in store.bookmarked_words_list] == ["Serendipity"]


class TestMarkAsLearned:
    """Tests for mark_as_learned"""

    def test_partition_of_catalog(self, store, catalog):
        store.mark_as_learned("Ephemeral")
        learned = store.learned_words
        to_learn = {w.word for w in store.words_to_learn}
        assert learned.isdisjoint(to_learn)
        assert (learned & {w.word for w in catalog}) | to_learn == {w.word for w in catalog}

    def test_idempotent(self, store):
        assert store.mark_as_learned("Ephemeral") is True
        assert store.mark_as_learned("Ephemeral") is False
        assert store.progress.words_learned == 2

    def test_unknown_word_counts_but_is_not_in_deck(self, store):
        store.mark_as_learned("Lexicographer")
        assert store.is_learned("Lexicographer")
        assert len(store.words_to_learn) == 6

    def test_identity_is_case_sensitive(self, store):
        store.mark_as_learned("ephemeral")
        assert "Ephemeral" in {w.word for w in store.words_to_learn}

    def test_thirty_words_is_silver(self, catalog):
        store = ProgressStore(catalog, learned_words=[f"word{i}" for i in range(30)])
        assert store.progress.rank.name == "Silver"


class TestToggleBookmark:
    """Tests for toggle_bookmark"""

    def test_double_toggle_restores_membership(self, store):
        before = store.bookmarked_words
        store.toggle_bookmark("Ephemeral")
        store.toggle_bookmark("Ephemeral")
        assert store.bookmarked_words == before

    def test_returns_new_membership(self, store):
        assert store.toggle_bookmark("Serendipity") is False
        assert store.toggle_bookmark("Serendipity") is True


class TestRecordQuizResult:
    """Tests for record_quiz_result"""

    def test_answered_increments_by_one(self, store):
        answered = store.total_answered
        store.record_quiz_result(False)
        assert store.total_answered == answered + 1
        store.record_quiz_result(True)
        assert store.total_answered == answered + 2

    def test_correct_only_on_correct(self, store):
        correct = store.total_correct
        store.record_quiz_result(False)
        assert store.total_correct == correct
        store.record_quiz_result(True)
        assert store.total_correct == correct + 1

    def test_accuracy_recomputed(self, empty_store):
        assert empty_store.progress.accuracy == 0
        empty_store.record_quiz_result(True)
        empty_store.record_quiz_result(False)
        assert empty_store.progress.accuracy == 50

    def test_rejects_invalid_counters(self, catalog):
        with pytest.raises(ValueError):
            ProgressStore(catalog, total_correct=3, total_answered=2)


class TestSubscriptions:
    """Tests for change listeners"""

    def test_listener_receives_events(self, store):
        listener = MagicMock()
        store.subscribe(listener)

        store.mark_as_learned("Ephemeral")
        store.toggle_bookmark("Ephemeral")
        store.record_quiz_result(True)

        kinds = [call.args[0].kind for call in listener.call_args_list]
        assert kinds == [
            ProgressEventKind.WORD_LEARNED,
            ProgressEventKind.BOOKMARK_TOGGLED,
            ProgressEventKind.QUIZ_RESULT
        ]
        first = listener.call_args_list[0].args[0]
        assert first.word == "Ephemeral"
        assert first.progress.words_learned == 2

    def test_no_event_when_nothing_changes(self, store):
        listener = MagicMock()
        store.subscribe(listener)
        store.mark_as_learned("Benevolent")
        listener.assert_not_called()

    def test_unsubscribe(self, store):
        listener = MagicMock()
        unsubscribe = store.subscribe(listener)
        unsubscribe()
        store.record_quiz_result(True)
        listener.assert_not_called()

    def test_failing_listener_does_not_block_others(self, store):
        failing = MagicMock(side_effect=RuntimeError("boom"))
        listener = MagicMock()
        store.subscribe(failing)
        store.subscribe(listener)

        assert store.mark_as_learned("Ephemeral") is True
        listener.assert_called_once()
        assert store.is_learned("Ephemeral")

    def test_event_to_dict(self, store):
        listener = MagicMock()
        store.subscribe(listener)
        store.toggle_bookmark("Ephemeral")

        payload = listener.call_args.args[0].to_dict()
        assert payload["type"] == "progress_changed"
        assert payload["kind"] == "bookmark_toggled"
        assert payload["bookmarked"] is True
        assert payload["progress"]["words_learned"] == 1
