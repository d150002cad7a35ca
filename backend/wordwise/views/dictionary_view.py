"""
Dictionary Views
Word lookup (dictionary overlay) and reverse dictionary (search tab).

Both views validate input before any remote call, show a loading state
while the request is in flight, and end in a result or an error message.
A request still in flight when the view is left does not update the view.
"""
from typing import Optional

from wordwise.core.cancellation import CancellationToken
from wordwise.core.errors import ContentUnavailableError
from wordwise.schemas.dictionary import (
    DictionaryResponse,
    DisplayState,
    ReverseDictionaryResponse
)
from wordwise.views.base_view import BaseView


DICTIONARY_EMPTY_MESSAGE = "Search for a word to see its definition here."
DICTIONARY_INVALID_MESSAGE = "Please enter a word to search."
DICTIONARY_ERROR_MESSAGE = "An error occurred while searching. Please try again later."
REVERSE_EMPTY_MESSAGE = "Describe a word and we'll find it for you."
REVERSE_ERROR_MESSAGE = "An error occurred while fetching results. Please try again."


def not_found_message(query: str) -> str:
    return f'Could not find a definition for "{query}". Check the spelling or try another word.'


def reverse_invalid_message(min_length: int) -> str:
    return f"Please enter a more descriptive phrase (at least {min_length} characters)."


class DictionaryView(BaseView):
    """Look up a single word"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._state = DictionaryResponse(state=DisplayState.EMPTY, message=DICTIONARY_EMPTY_MESSAGE)
        self._token: Optional[CancellationToken] = None

    @property
    def name(self) -> str:
        return "dictionary"

    @property
    def description(self) -> str:
        return "Definition, pronunciation, example and synonyms for a word"

    async def render(self) -> DictionaryResponse:
        return self._state

    async def lookup(self, query: str) -> DictionaryResponse:
        """
        Look up a word.

        Too-short queries are rejected without a remote call. A lookup that
        returns nothing is reported as not found; a failed lookup is
        reported as an error.
        """
        query = query.strip()
        if len(query) < self.settings.DICTIONARY_MIN_QUERY_LENGTH:
            self._state = DictionaryResponse(
                state=DisplayState.ERROR,
                query=query,
                message=DICTIONARY_INVALID_MESSAGE
            )
            return self._state

        if self._token is not None:
            self._token.cancel("superseded")
        token = CancellationToken(f"lookup:{query}")
        self._token = token
        self._state = DictionaryResponse(state=DisplayState.LOADING, query=query)

        self.log_start({"query": query})
        try:
            word = await self.gateway.get_word_details(query)
            if word is None:
                result = DictionaryResponse(
                    state=DisplayState.ERROR,
                    query=query,
                    message=not_found_message(query)
                )
            else:
                result = DictionaryResponse(state=DisplayState.RESULT, query=query, word=word)
        except ContentUnavailableError as e:
            self.log_error(e, {"query": query})
            result = DictionaryResponse(
                state=DisplayState.ERROR,
                query=query,
                message=DICTIONARY_ERROR_MESSAGE
            )

        if token.cancelled:
            self.log_debug(f"Dropping stale lookup result for '{query}'")
            return result
        self._token = None
        self._state = result
        self.log_complete({"state": result.state})
        return result

    def on_leave(self) -> None:
        if self._token is not None:
            self._token.cancel("dictionary closed")
            self._token = None
        self._state = DictionaryResponse(state=DisplayState.EMPTY, message=DICTIONARY_EMPTY_MESSAGE)


class ReverseDictionaryView(BaseView):
    """Find words that match a description"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._state = ReverseDictionaryResponse(state=DisplayState.EMPTY, message=REVERSE_EMPTY_MESSAGE)
        self._token: Optional[CancellationToken] = None

    @property
    def name(self) -> str:
        return "search"

    @property
    def description(self) -> str:
        return "Reverse dictionary: words from a description"

    async def render(self) -> ReverseDictionaryResponse:
        return self._state

    async def search(self, description: str) -> ReverseDictionaryResponse:
        """Suggest words for a description of at least the minimum length."""
        description = description.strip()
        min_length = self.settings.REVERSE_DICTIONARY_MIN_LENGTH
        if len(description) < min_length:
            self._state = ReverseDictionaryResponse(
                state=DisplayState.ERROR,
                description=description,
                message=reverse_invalid_message(min_length)
            )
            return self._state

        if self._token is not None:
            self._token.cancel("superseded")
        token = CancellationToken("reverse_search")
        self._token = token
        self._state = ReverseDictionaryResponse(state=DisplayState.LOADING, description=description)

        self.log_start({"description": description})
        try:
            words = await self.gateway.find_words_from_description(description)
            result = ReverseDictionaryResponse(
                state=DisplayState.RESULT,
                description=description,
                words=words
            )
        except Exception as e:
            self.log_error(e, {"description": description})
            result = ReverseDictionaryResponse(
                state=DisplayState.ERROR,
                description=description,
                message=REVERSE_ERROR_MESSAGE
            )

        if token.cancelled:
            self.log_debug("Dropping stale reverse dictionary result")
            return result
        self._token = None
        self._state = result
        self.log_complete({"words": len(result.words)})
        return result

    def on_leave(self) -> None:
        if self._token is not None:
            self._token.cancel("search left")
            self._token = None
        self._state = ReverseDictionaryResponse(state=DisplayState.EMPTY, message=REVERSE_EMPTY_MESSAGE)
