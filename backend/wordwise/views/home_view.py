"""
Home View
Dashboard with the word of the day, quote of the day and learner stats.

Daily content is read through the 24-hour cache and refetched from the
content gateway when the cached entry is missing or stale.
"""
import asyncio
from typing import Optional

from pydantic import ValidationError

from wordwise.config import Settings
from wordwise.core.progress_store import ProgressStore
from wordwise.models.vocabulary import Quote, Word
from wordwise.schemas.home import ActivityPoint, HomeResponse
from wordwise.services.content_gateway import ContentGateway
from wordwise.services.daily_cache import (
    DailyCache,
    QUOTE_OF_THE_DAY_KEY,
    WORD_OF_THE_DAY_KEY
)
from wordwise.views.base_view import BaseView


GREETING = "Welcome back!"

# Sample weekly series shown on the activity chart
WEEKLY_ACTIVITY = (
    ActivityPoint(name="Mon", words=2),
    ActivityPoint(name="Tue", words=3),
    ActivityPoint(name="Wed", words=1),
    ActivityPoint(name="Thu", words=4),
    ActivityPoint(name="Fri", words=5),
    ActivityPoint(name="Sat", words=3),
    ActivityPoint(name="Sun", words=6),
)


class HomeView(BaseView):
    """Home dashboard"""

    def __init__(
        self,
        progress: ProgressStore,
        gateway: ContentGateway,
        cache: DailyCache,
        settings: Settings | None = None
    ):
        super().__init__(progress, gateway, settings)
        self.cache = cache

    @property
    def name(self) -> str:
        return "home"

    @property
    def description(self) -> str:
        return "Word of the day, quote of the day and progress stats"

    async def render(self) -> HomeResponse:
        word, quote = await asyncio.gather(self.get_word_of_the_day(), self.get_quote())
        return HomeResponse(
            greeting=GREETING,
            word_of_the_day=word,
            quote=quote,
            stats=self.progress.progress,
            weekly_activity=list(WEEKLY_ACTIVITY),
            can_open_dictionary=True
        )

    async def get_word_of_the_day(self) -> Word:
        """
        Word of the day from the cache or the gateway.

        Falls back to the first catalog word if the gateway raises.
        """
        cached = self.cache.get(WORD_OF_THE_DAY_KEY)
        if cached is not None:
            try:
                return Word(**cached)
            except (TypeError, ValidationError) as e:
                self.log_debug("Ignoring invalid cached word of the day", str(e))

        try:
            word = await self.gateway.get_word_of_the_day()
        except Exception as e:
            self.log_error(e, {"context": "word_of_the_day"})
            return self.progress.all_words[0]

        self.cache.set(WORD_OF_THE_DAY_KEY, word.model_dump())
        return word

    async def get_quote(self) -> Optional[Quote]:
        """Quote of the day from the cache or the gateway, None if unavailable."""
        cached = self.cache.get(QUOTE_OF_THE_DAY_KEY)
        if cached is not None:
            try:
                return Quote(**cached)
            except (TypeError, ValidationError) as e:
                self.log_debug("Ignoring invalid cached quote", str(e))

        try:
            quote = await self.gateway.get_vocabulary_quote()
        except Exception as e:
            self.log_error(e, {"context": "quote_of_the_day"})
            return None

        self.cache.set(QUOTE_OF_THE_DAY_KEY, quote.model_dump())
        return quote
