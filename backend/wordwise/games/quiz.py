"""
Vocabulary Quiz
Multiple-choice quiz over randomly sampled catalog words.

Phases:
    LOADING -> PRESENTING(i) -> ANSWERED(i) -> PRESENTING(i+1) | COMPLETE

Questions are generated concurrently and kept in issuance order. Every
answer is recorded in the progress store; a correct answer also marks the
question's word as learned. COMPLETE is terminal.
"""
import asyncio
import logging
import random
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from wordwise.core.cancellation import CancellationToken
from wordwise.core.errors import InvalidTransitionError
from wordwise.core.progress_store import ProgressStore
from wordwise.models.vocabulary import QuizQuestion, Word
from wordwise.services.content_gateway import ContentGateway

logger = logging.getLogger(__name__)

QUIZ_LENGTH = 5


class QuizPhase(str, Enum):
    LOADING = "loading"
    PRESENTING = "presenting"
    ANSWERED = "answered"
    COMPLETE = "complete"


class QuizAnswer(BaseModel):
    """Outcome of one answered question"""
    word: str
    selected_option: str
    correct_answer: str
    is_correct: bool


def star_rating(score: int, total: int) -> int:
    """Stars earned for a finished quiz: 3 at 90%, 2 at 60%, 1 at 30%."""
    percentage = score / total * 100 if total > 0 else 0
    if percentage >= 90:
        return 3
    if percentage >= 60:
        return 2
    if percentage >= 30:
        return 1
    return 0


class QuizSession:
    """One run of the vocabulary quiz"""

    def __init__(
        self,
        gateway: ContentGateway,
        progress: ProgressStore,
        length: int = QUIZ_LENGTH,
        rng: Optional[random.Random] = None
    ):
        self.gateway = gateway
        self.progress = progress
        self.length = length
        self.rng = rng or random.Random()
        self.token = CancellationToken("quiz")

        self.phase = QuizPhase.LOADING
        self.questions: list[QuizQuestion] = []
        self.current_index = 0
        self.score = 0
        self.answers: list[QuizAnswer] = []

    # ==================== LIFECYCLE ====================

    async def load(self) -> None:
        """Sample words and generate all questions."""
        if self.phase != QuizPhase.LOADING:
            raise InvalidTransitionError(f"Quiz already loaded (phase: {self.phase.value})")

        words = self._sample_words()
        questions = await asyncio.gather(
            *(self.gateway.generate_quiz_question(word) for word in words)
        )

        if self.token.cancelled:
            logger.info("Quiz closed while loading, discarding generated questions")
            return

        self.questions = list(questions)
        self.current_index = 0
        self.phase = QuizPhase.PRESENTING if self.questions else QuizPhase.COMPLETE
        logger.info(f"Quiz ready with {len(self.questions)} questions")

    def close(self) -> None:
        """Stop accepting results; pending loads are discarded."""
        self.token.cancel("quiz closed")

    @property
    def closed(self) -> bool:
        return self.token.cancelled

    def _sample_words(self) -> list[Word]:
        catalog = list(self.progress.all_words)
        return self.rng.sample(catalog, min(self.length, len(catalog)))

    # ==================== TRANSITIONS ====================

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Optional[QuizQuestion]:
        if self.phase in (QuizPhase.PRESENTING, QuizPhase.ANSWERED):
            return self.questions[self.current_index]
        return None

    @property
    def last_answer(self) -> Optional[QuizAnswer]:
        if self.phase == QuizPhase.ANSWERED:
            return self.answers[-1]
        return None

    @property
    def stars(self) -> int:
        return star_rating(self.score, self.total)

    def answer(self, option: str) -> QuizAnswer:
        """Select an option for the current question."""
        self._ensure_open()
        if self.phase != QuizPhase.PRESENTING:
            raise InvalidTransitionError(f"Cannot answer while {self.phase.value}")

        question = self.questions[self.current_index]
        if option not in question.options:
            raise InvalidTransitionError(f"'{option}' is not one of the options")

        is_correct = option == question.correct_answer
        self.progress.record_quiz_result(is_correct)
        if is_correct:
            self.score += 1
            self.progress.mark_as_learned(question.word)

        result = QuizAnswer(
            word=question.word,
            selected_option=option,
            correct_answer=question.correct_answer,
            is_correct=is_correct
        )
        self.answers.append(result)
        self.phase = QuizPhase.ANSWERED
        return result

    def advance(self) -> QuizPhase:
        """Move past an answered question."""
        self._ensure_open()
        if self.phase != QuizPhase.ANSWERED:
            raise InvalidTransitionError(f"Cannot advance while {self.phase.value}")

        if self.current_index + 1 < self.total:
            self.current_index += 1
            self.phase = QuizPhase.PRESENTING
        else:
            self.phase = QuizPhase.COMPLETE
            logger.info(f"Quiz complete: {self.score}/{self.total}")
        return self.phase

    def _ensure_open(self) -> None:
        if self.token.cancelled:
            raise InvalidTransitionError("Quiz session is closed")
