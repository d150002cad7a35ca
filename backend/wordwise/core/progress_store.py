"""
Progress Store
Holds the learner's vocabulary progress for the running process.

State:
- learned words (grows only)
- bookmarked words (toggles)
- quiz answer counters

Derived views (recomputed on every read):
- words_to_learn: catalog words not yet learned, catalog order
- bookmarked_words_list: bookmarked catalog words, catalog order
- progress: words learned, accuracy and rank

The store is mutated only through mark_as_learned, toggle_bookmark and
record_quiz_result. Subscribers are notified after every effective change.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional

from wordwise.models.progress import UserProgress, calculate_accuracy, rank_for
from wordwise.models.vocabulary import Word

logger = logging.getLogger(__name__)


# Demo learner state the app starts with
SEED_LEARNED_WORDS = frozenset({"Benevolent"})
SEED_BOOKMARKED_WORDS = frozenset({"Serendipity"})
SEED_TOTAL_CORRECT = 15
SEED_TOTAL_ANSWERED = 18


class ProgressEventKind(str, Enum):
    """Kind of progress mutation"""
    WORD_LEARNED = "word_learned"
    BOOKMARK_TOGGLED = "bookmark_toggled"
    QUIZ_RESULT = "quiz_result"


@dataclass(frozen=True)
class ProgressEvent:
    """Change notification sent to subscribers."""
    kind: ProgressEventKind
    progress: UserProgress
    word: Optional[str] = None
    bookmarked: Optional[bool] = None
    correct: Optional[bool] = None

    def to_dict(self) -> dict:
        return {
            "type": "progress_changed",
            "kind": self.kind.value,
            "word": self.word,
            "bookmarked": self.bookmarked,
            "correct": self.correct,
            "progress": self.progress.model_dump()
        }


ProgressListener = Callable[[ProgressEvent], None]


class ProgressStore:
    """Learned/bookmarked sets and quiz counters over a fixed word catalog."""

    def __init__(
        self,
        catalog: Iterable[Word],
        learned_words: Iterable[str] = (),
        bookmarked_words: Iterable[str] = (),
        total_correct: int = 0,
        total_answered: int = 0
    ):
        if total_correct < 0 or total_answered < 0 or total_correct > total_answered:
            raise ValueError(
                f"Invalid quiz counters: correct={total_correct}, answered={total_answered}"
            )
        self._catalog: tuple[Word, ...] = tuple(catalog)
        self._learned: set[str] = set(learned_words)
        self._bookmarked: set[str] = set(bookmarked_words)
        self._total_correct = total_correct
        self._total_answered = total_answered
        self._listeners: list[ProgressListener] = []

    @classmethod
    def seeded(cls, catalog: Iterable[Word]) -> "ProgressStore":
        """Store with the demo learner state the app starts with."""
        return cls(
            catalog,
            learned_words=SEED_LEARNED_WORDS,
            bookmarked_words=SEED_BOOKMARKED_WORDS,
            total_correct=SEED_TOTAL_CORRECT,
            total_answered=SEED_TOTAL_ANSWERED
        )

    # ==================== STATE ====================

    @property
    def all_words(self) -> tuple[Word, ...]:
        return self._catalog

    @property
    def learned_words(self) -> frozenset[str]:
        return frozenset(self._learned)

    @property
    def bookmarked_words(self) -> frozenset[str]:
        return frozenset(self._bookmarked)

    @property
    def total_correct(self) -> int:
        return self._total_correct

    @property
    def total_answered(self) -> int:
        return self._total_answered

    def is_learned(self, word: str) -> bool:
        return word in self._learned

    def is_bookmarked(self, word: str) -> bool:
        return word in self._bookmarked

    # ==================== DERIVED ====================

    @property
    def words_to_learn(self) -> list[Word]:
        return [w for w in self._catalog if w.word not in self._learned]

    @property
    def bookmarked_words_list(self) -> list[Word]:
        return [w for w in self._catalog if w.word in self._bookmarked]

    @property
    def progress(self) -> UserProgress:
        words_learned = len(self._learned)
        return UserProgress(
            words_learned=words_learned,
            accuracy=calculate_accuracy(self._total_correct, self._total_answered),
            rank=rank_for(words_learned)
        )

    # ==================== COMMANDS ====================

    def mark_as_learned(self, word: str) -> bool:
        """
        Add a word to the learned set.

        Returns:
            True if the word was newly learned, False if already present
        """
        if word in self._learned:
            return False
        self._learned.add(word)
        logger.debug(f"Marked as learned: {word}")
        self._notify(ProgressEvent(
            kind=ProgressEventKind.WORD_LEARNED,
            progress=self.progress,
            word=word
        ))
        return True

    def toggle_bookmark(self, word: str) -> bool:
        """
        Flip bookmark membership of a word.

        Returns:
            True if the word is bookmarked after the call
        """
        if word in self._bookmarked:
            self._bookmarked.discard(word)
            bookmarked = False
        else:
            self._bookmarked.add(word)
            bookmarked = True
        logger.debug(f"Bookmark toggled: {word} -> {bookmarked}")
        self._notify(ProgressEvent(
            kind=ProgressEventKind.BOOKMARK_TOGGLED,
            progress=self.progress,
            word=word,
            bookmarked=bookmarked
        ))
        return bookmarked

    def record_quiz_result(self, is_correct: bool) -> None:
        """Count one answered quiz question."""
        self._total_answered += 1
        if is_correct:
            self._total_correct += 1
        self._notify(ProgressEvent(
            kind=ProgressEventKind.QUIZ_RESULT,
            progress=self.progress,
            correct=is_correct
        ))

    # ==================== SUBSCRIPTIONS ====================

    def subscribe(self, listener: ProgressListener) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: ProgressEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.error(f"Progress listener failed on {event.kind.value}: {e}", exc_info=True)
