"""
Practice View
Practice zone with two games: the vocabulary quiz and the synonym swipe.

Modes:
- menu: list of activities
- quiz: a QuizSession is running
- swipe: a SwipeSession is running

Starting a game replaces whatever game was running; returning to the menu
or navigating away closes the running session so late remote results are
dropped.
"""
import random
from enum import Enum
from typing import Optional

from wordwise.core.errors import SessionNotFoundError
from wordwise.games.quiz import QuizPhase, QuizSession
from wordwise.games.swipe import SwipePhase, SwipeSession
from wordwise.schemas.practice import (
    PracticeActivity,
    PracticeResponse,
    QuizAnswerContent,
    QuizQuestionContent,
    QuizStateResponse,
    SwipeCard,
    SwipeStateResponse
)
from wordwise.views.base_view import BaseView


class PracticeMode(str, Enum):
    MENU = "menu"
    QUIZ = "quiz"
    SWIPE = "swipe"


ACTIVITIES = (
    PracticeActivity(
        mode=PracticeMode.QUIZ.value,
        title="Vocabulary Quiz",
        description="Test your knowledge with multiple-choice questions.",
        icon="brain"
    ),
    PracticeActivity(
        mode=PracticeMode.SWIPE.value,
        title="Synonym Swipe",
        description="A fast-paced game to identify synonyms.",
        icon="gamepad-2"
    ),
)


class PracticeView(BaseView):
    """Practice menu and the running game"""

    def __init__(self, *args, rng: Optional[random.Random] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.rng = rng or random.Random()
        self.mode = PracticeMode.MENU
        self.quiz: Optional[QuizSession] = None
        self.swipe: Optional[SwipeSession] = None

    @property
    def name(self) -> str:
        return "practice"

    @property
    def description(self) -> str:
        return "Quiz and synonym swipe games"

    async def render(self) -> PracticeResponse:
        return PracticeResponse(
            mode=self.mode.value,
            activities=list(ACTIVITIES),
            quiz=self.quiz_state() if self.quiz else None,
            swipe=self.swipe_state() if self.swipe else None
        )

    def back_to_menu(self) -> None:
        self._close_sessions()
        self.mode = PracticeMode.MENU

    def on_leave(self) -> None:
        self.back_to_menu()

    def _close_sessions(self) -> None:
        if self.quiz is not None:
            self.quiz.close()
            self.quiz = None
        if self.swipe is not None:
            self.swipe.close()
            self.swipe = None

    # ==================== QUIZ ====================

    async def start_quiz(self) -> QuizStateResponse:
        """Start a new quiz and wait for its questions."""
        self._close_sessions()
        session = QuizSession(
            self.gateway,
            self.progress,
            length=self.settings.QUIZ_LENGTH,
            rng=self.rng
        )
        self.quiz = session
        self.mode = PracticeMode.QUIZ

        self.log_start({"game": "quiz", "length": session.length})
        await session.load()
        self.log_complete({"questions": session.total, "closed": session.closed})
        return self.quiz_state(session)

    def _require_quiz(self) -> QuizSession:
        if self.quiz is None:
            raise SessionNotFoundError("No quiz is running")
        return self.quiz

    def answer_quiz(self, option: str) -> QuizStateResponse:
        session = self._require_quiz()
        session.answer(option)
        return self.quiz_state(session)

    def next_quiz_question(self) -> QuizStateResponse:
        session = self._require_quiz()
        session.advance()
        return self.quiz_state(session)

    def quiz_state(self, session: Optional[QuizSession] = None) -> QuizStateResponse:
        session = session or self._require_quiz()

        if session.phase == QuizPhase.LOADING:
            return QuizStateResponse(phase=session.phase.value, message="Preparing your quiz...")

        if session.phase == QuizPhase.COMPLETE:
            if session.total == 0:
                return QuizStateResponse(
                    phase=session.phase.value,
                    message="Could not load the quiz. Please try again."
                )
            return QuizStateResponse(
                phase=session.phase.value,
                question_number=session.total,
                total_questions=session.total,
                score=session.score,
                stars=session.stars,
                message=f"You scored {session.score} out of {session.total}!"
            )

        question = session.current_question
        last = session.last_answer
        return QuizStateResponse(
            phase=session.phase.value,
            question_number=session.current_index + 1,
            total_questions=session.total,
            question=QuizQuestionContent(
                definition=question.definition,
                options=list(question.options)
            ),
            answer=QuizAnswerContent(**last.model_dump()) if last else None,
            score=session.score
        )

    # ==================== SWIPE ====================

    async def start_swipe(self) -> SwipeStateResponse:
        """Start a new swipe game and load its first pair."""
        self._close_sessions()
        session = SwipeSession(
            self.gateway,
            length=self.settings.SWIPE_GAME_LENGTH,
            feedback_delay=self.settings.SWIPE_FEEDBACK_DELAY_SECONDS
        )
        self.swipe = session
        self.mode = PracticeMode.SWIPE

        self.log_start({"game": "swipe", "length": session.length})
        await session.load_round()
        return self.swipe_state(session)

    def _require_swipe(self) -> SwipeSession:
        if self.swipe is None:
            raise SessionNotFoundError("No swipe game is running")
        return self.swipe

    def answer_swipe(self, is_synonym: bool) -> SwipeStateResponse:
        session = self._require_swipe()
        session.swipe(is_synonym)
        return self.swipe_state(session)

    async def next_swipe_round(self) -> SwipeStateResponse:
        session = self._require_swipe()
        await session.advance()
        return self.swipe_state(session)

    def swipe_state(self, session: Optional[SwipeSession] = None) -> SwipeStateResponse:
        session = session or self._require_swipe()

        if session.phase == SwipePhase.COMPLETE:
            return SwipeStateResponse(
                phase=session.phase.value,
                round_number=session.length,
                total_rounds=session.length,
                score=session.score,
                message=f"Game over! You scored {session.score} out of {session.length}."
            )

        response = SwipeStateResponse(
            phase=session.phase.value,
            round_number=session.round + 1,
            total_rounds=session.length,
            score=session.score
        )
        if session.phase == SwipePhase.LOADING:
            response.message = "Loading pair..."
        elif session.card is not None:
            response.card = SwipeCard(word1=session.card.word1, word2=session.card.word2)
            if session.phase == SwipePhase.FEEDBACK:
                response.feedback = session.feedback.value
                response.are_synonyms = session.card.are_synonyms
        return response
