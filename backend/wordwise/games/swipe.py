"""
Synonym Swipe
Fast-paced game: decide whether two words are synonyms.

Phases:
    LOADING(r) -> PRESENTING(r) -> FEEDBACK(r) -> PRESENTING(r+1) | COMPLETE

Each round fetches one word pair. Feedback stays up for a fixed delay
before the next round loads. Unlike the quiz, this game does not touch
learner progress.
"""
import asyncio
import logging
import time
from enum import Enum
from typing import Callable, Optional

from wordwise.core.cancellation import CancellationToken
from wordwise.core.errors import InvalidTransitionError
from wordwise.models.vocabulary import SwipeItem
from wordwise.services.content_gateway import ContentGateway

logger = logging.getLogger(__name__)

GAME_LENGTH = 10
FEEDBACK_DELAY_SECONDS = 1.0


class SwipePhase(str, Enum):
    LOADING = "loading"
    PRESENTING = "presenting"
    FEEDBACK = "feedback"
    COMPLETE = "complete"


class SwipeFeedback(str, Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"


class SwipeSession:
    """One run of the synonym swipe game"""

    def __init__(
        self,
        gateway: ContentGateway,
        length: int = GAME_LENGTH,
        feedback_delay: float = FEEDBACK_DELAY_SECONDS,
        clock: Callable[[], float] = time.monotonic
    ):
        self.gateway = gateway
        self.length = length
        self.feedback_delay = feedback_delay
        self.clock = clock
        self.token = CancellationToken("swipe")

        self.phase = SwipePhase.LOADING
        self.round = 0
        self.score = 0
        self.card: Optional[SwipeItem] = None
        self.feedback: Optional[SwipeFeedback] = None
        self._feedback_at: Optional[float] = None
        self._advancing = False

    async def load_round(self) -> None:
        """Fetch the pair for the current round."""
        self._ensure_open()
        if self.phase != SwipePhase.LOADING:
            raise InvalidTransitionError(f"Cannot load a round while {self.phase.value}")

        card = await self.gateway.get_synonym_antonym_pair()
        if self.token.cancelled:
            logger.info(f"Swipe game closed while loading round {self.round + 1}, discarding pair")
            return

        self.card = card
        self.feedback = None
        self.phase = SwipePhase.PRESENTING

    def swipe(self, is_synonym: bool) -> SwipeFeedback:
        """Assert whether the current pair are synonyms."""
        self._ensure_open()
        if self.phase != SwipePhase.PRESENTING or self.card is None:
            raise InvalidTransitionError(f"Cannot swipe while {self.phase.value}")

        if is_synonym == self.card.are_synonyms:
            self.score += 1
            self.feedback = SwipeFeedback.CORRECT
        else:
            self.feedback = SwipeFeedback.INCORRECT
        self._feedback_at = self.clock()
        self.phase = SwipePhase.FEEDBACK
        return self.feedback

    async def advance(self) -> SwipePhase:
        """
        Leave the feedback screen once the delay has elapsed, then load the
        next round or finish the game.
        """
        self._ensure_open()
        if self.phase != SwipePhase.FEEDBACK or self._advancing:
            raise InvalidTransitionError(f"Cannot advance while {self.phase.value}")

        self._advancing = True
        try:
            return await self._advance()
        finally:
            self._advancing = False

    async def _advance(self) -> SwipePhase:
        remaining = self.feedback_delay - (self.clock() - self._feedback_at)
        if remaining > 0:
            await asyncio.sleep(remaining)
        if self.token.cancelled:
            return self.phase

        self.round += 1
        if self.round < self.length:
            self.phase = SwipePhase.LOADING
            await self.load_round()
        else:
            self.card = None
            self.phase = SwipePhase.COMPLETE
            logger.info(f"Swipe game complete: {self.score}/{self.length}")
        return self.phase

    def close(self) -> None:
        self.token.cancel("swipe closed")

    @property
    def closed(self) -> bool:
        return self.token.cancelled

    def _ensure_open(self) -> None:
        if self.token.cancelled:
            raise InvalidTransitionError("Swipe session is closed")
