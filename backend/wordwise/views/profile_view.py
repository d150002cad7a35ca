"""
Profile View
Rank, stats, progress history and bookmarked words.
"""
from wordwise.schemas.profile import BookmarkedWord, ProfileResponse, ProgressPoint
from wordwise.views.base_view import BaseView


NO_BOOKMARKS_MESSAGE = "You have no bookmarked words."

# Sample history shown on the progress chart
PROGRESS_OVER_TIME = (
    ProgressPoint(week="Week 1", learned=10, accuracy=75),
    ProgressPoint(week="Week 2", learned=22, accuracy=80),
    ProgressPoint(week="Week 3", learned=35, accuracy=88),
    ProgressPoint(week="Week 4", learned=51, accuracy=92),
)


class ProfileView(BaseView):
    """Learner profile"""

    @property
    def name(self) -> str:
        return "profile"

    @property
    def description(self) -> str:
        return "Rank, stats and bookmarked words"

    async def render(self) -> ProfileResponse:
        progress = self.progress.progress
        bookmarks = [
            BookmarkedWord(word=w.word, definition=w.definition)
            for w in self.progress.bookmarked_words_list
        ]
        return ProfileResponse(
            display_name=self.settings.PROFILE_DISPLAY_NAME,
            rank=progress.rank,
            stats=progress,
            progress_over_time=list(PROGRESS_OVER_TIME),
            bookmarked_words=bookmarks,
            message=None if bookmarks else NO_BOOKMARKS_MESSAGE
        )

    def toggle_bookmark(self, word: str) -> bool:
        """
        Toggle a bookmark from the profile list.

        Raises:
            KeyError: if the word is not in the catalog
        """
        if not any(w.word == word for w in self.progress.all_words):
            raise KeyError(word)
        return self.progress.toggle_bookmark(word)
