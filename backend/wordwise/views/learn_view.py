"""
Learn View
Flashcard deck over the words the learner has not learned yet.
"""
from typing import Optional

from wordwise.models.vocabulary import Word
from wordwise.schemas.learn import Flashcard, LearnResponse
from wordwise.views.base_view import BaseView


COMPLETED_MESSAGE = (
    "Congratulations! You've learned all the available words. Check back later for more!"
)


class LearnView(BaseView):
    """Flashcard deck with previous/next navigation"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.current_index = 0

    @property
    def name(self) -> str:
        return "learn"

    @property
    def description(self) -> str:
        return "Flashcards for words still to learn"

    def _clamped_index(self, deck: list[Word]) -> int:
        # Other views can shrink the deck (quiz answers mark words learned)
        if not deck:
            return 0
        return min(self.current_index, len(deck) - 1)

    def current_word(self) -> Optional[Word]:
        deck = self.progress.words_to_learn
        if not deck:
            return None
        self.current_index = self._clamped_index(deck)
        return deck[self.current_index]

    async def render(self) -> LearnResponse:
        deck = self.progress.words_to_learn
        if not deck:
            return LearnResponse(status="completed", message=COMPLETED_MESSAGE)

        self.current_index = self._clamped_index(deck)
        word = deck[self.current_index]
        return LearnResponse(
            status="learning",
            card=Flashcard(
                **word.model_dump(),
                is_bookmarked=self.progress.is_bookmarked(word.word)
            ),
            position=self.current_index + 1,
            total=len(deck),
            has_previous=self.current_index > 0,
            has_next=self.current_index < len(deck) - 1
        )

    def next(self) -> None:
        deck = self.progress.words_to_learn
        if self.current_index < len(deck) - 1:
            self.current_index += 1

    def previous(self) -> None:
        if self.current_index > 0:
            self.current_index -= 1

    def mark_current_learned(self) -> Optional[str]:
        """
        Mark the card on screen as learned.

        When the last card of the deck is removed the cursor steps back so
        it keeps pointing at a card.

        Returns:
            The learned word, or None if the deck is empty
        """
        deck = self.progress.words_to_learn
        if not deck:
            return None
        self.current_index = self._clamped_index(deck)
        word = deck[self.current_index].word

        self.progress.mark_as_learned(word)
        if self.current_index >= len(deck) - 1 and len(deck) > 1:
            self.current_index -= 1

        self.log_debug(f"Learned from flashcard: {word}")
        return word

    def toggle_current_bookmark(self) -> Optional[tuple[str, bool]]:
        """
        Toggle the bookmark of the card on screen.

        Returns:
            (word, bookmarked) or None if the deck is empty
        """
        word = self.current_word()
        if word is None:
            return None
        return word.word, self.progress.toggle_bookmark(word.word)

    def on_leave(self) -> None:
        self.current_index = 0
