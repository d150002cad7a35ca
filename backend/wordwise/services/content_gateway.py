"""
Content Gateway
Generated vocabulary content: word of the day, quote of the day, quiz
questions, synonym pairs, reverse dictionary and word lookup.

Two implementations share the ContentGateway interface:
- RemoteContentGateway: asks the chat-completion service for JSON content
- FixtureContentGateway: returns fixed content when no service is configured

Failure policy:
- get_word_details raises ContentUnavailableError when the service fails and
  returns None when the answer is empty or incomplete (word not found)
- every other operation logs the failure and returns its fixture value
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from wordwise.config import Settings, get_settings
from wordwise.core.errors import ContentUnavailableError
from wordwise.models.vocabulary import QuizQuestion, Quote, SwipeItem, Word, WordDifficulty
from wordwise.services.openai_service import ChatCompletionService, ContentFormatError

logger = logging.getLogger(__name__)


# ==================== FIXTURE CONTENT ====================

MOCK_WORD = Word(
    word="Lexicographer",
    pronunciation="/ˌlɛksɪˈkɒɡrəfər/",
    definition="A person who compiles dictionaries.",
    example="The lexicographer diligently updated the new edition of the dictionary.",
    synonyms=["word-smith", "glossologist", "dictionary-maker"],
    difficulty=WordDifficulty.MEDIUM
)

MOCK_DICTIONARY_WORD = Word(
    word="Query",
    pronunciation="/ˈkwɪəri/",
    definition="A question, especially one addressed to an official or organization.",
    example="The journalist posed a sharp query to the politician.",
    synonyms=["question", "inquiry", "interrogation"],
    difficulty=WordDifficulty.EASY
)

MOCK_QUIZ_QUESTION = QuizQuestion(
    word="Ephemeral",
    definition="Lasting for a very short time.",
    options=["Ephemeral", "Eternal", "Ubiquitous", "Ancient"],
    correct_answer="Ephemeral"
)

MOCK_SWIPE_ITEM = SwipeItem(word1="Happy", word2="Joyful", are_synonyms=True)

MOCK_REVERSE_SEARCH_RESULT: tuple[str, ...] = ("Vocabulary", "Lexicon", "Glossary")

MOCK_QUOTE = Quote(
    quote="The limits of my language mean the limits of my world.",
    author="Ludwig Wittgenstein"
)

WORD_FIELDS = ("word", "pronunciation", "definition", "example")


def word_from_payload(payload: Any) -> Optional[Word]:
    """
    Build a Word from a generated payload.

    A complete payload carries non-empty word, definition, example and
    pronunciation strings and a list of synonyms. Generated words are
    always rated medium difficulty.

    Returns:
        The Word, or None if the payload is incomplete
    """
    if not isinstance(payload, dict):
        return None
    for field in WORD_FIELDS:
        value = payload.get(field)
        if not isinstance(value, str) or not value.strip():
            return None
    synonyms = payload.get("synonyms")
    if not isinstance(synonyms, list):
        return None
    return Word(
        word=payload["word"].strip(),
        pronunciation=payload["pronunciation"].strip(),
        definition=payload["definition"].strip(),
        example=payload["example"].strip(),
        synonyms=[str(s) for s in synonyms],
        difficulty=WordDifficulty.MEDIUM
    )


# ==================== INTERFACE ====================

class ContentGateway(ABC):
    """Source of generated vocabulary content"""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    async def get_word_of_the_day(self) -> Word:
        pass

    @abstractmethod
    async def get_vocabulary_quote(self) -> Quote:
        pass

    @abstractmethod
    async def generate_quiz_question(self, word: Word) -> QuizQuestion:
        pass

    @abstractmethod
    async def get_synonym_antonym_pair(self) -> SwipeItem:
        pass

    @abstractmethod
    async def find_words_from_description(self, description: str) -> list[str]:
        pass

    @abstractmethod
    async def get_word_details(self, word: str) -> Optional[Word]:
        """
        Look up an arbitrary word.

        Returns:
            The Word, or None if it is not a known word

        Raises:
            ContentUnavailableError: if the lookup could not be performed
        """
        pass


# ==================== FIXTURE ====================

class FixtureContentGateway(ContentGateway):
    """Fixed content used when no generative service is configured"""

    @property
    def name(self) -> str:
        return "fixture"

    async def get_word_of_the_day(self) -> Word:
        return MOCK_WORD

    async def get_vocabulary_quote(self) -> Quote:
        return MOCK_QUOTE

    async def generate_quiz_question(self, word: Word) -> QuizQuestion:
        return MOCK_QUIZ_QUESTION

    async def get_synonym_antonym_pair(self) -> SwipeItem:
        return MOCK_SWIPE_ITEM

    async def find_words_from_description(self, description: str) -> list[str]:
        return list(MOCK_REVERSE_SEARCH_RESULT)

    async def get_word_details(self, word: str) -> Optional[Word]:
        if word.strip().lower() == "query":
            return MOCK_DICTIONARY_WORD
        return None


# ==================== REMOTE ====================

class RemoteContentGateway(ContentGateway):
    """Content generated through the chat-completion service"""

    def __init__(self, chat_service: ChatCompletionService):
        self.chat_service = chat_service

    @property
    def name(self) -> str:
        return "remote"

    async def get_word_of_the_day(self) -> Word:
        prompt = """Provide me with an interesting English vocabulary word that is not too obscure.
Include its pronunciation, definition, an example sentence, and a few synonyms.

Respond in JSON format:
{
    "word": "the word",
    "pronunciation": "/phonetic transcription/",
    "definition": "Short definition",
    "example": "An example sentence using the word",
    "synonyms": ["synonym1", "synonym2", "synonym3"]
}"""
        try:
            parsed = await self.chat_service.complete_json(prompt, temperature=0.9)
        except Exception as e:
            logger.error(f"Error fetching word of the day: {e}")
            return MOCK_WORD

        word = word_from_payload(parsed)
        if word is None:
            logger.warning(f"Word of the day response was incomplete, using fixture word: {parsed}")
            return MOCK_WORD
        return word

    async def get_vocabulary_quote(self) -> Quote:
        prompt = """Provide a short, inspiring quote about words, vocabulary, or language
from a famous author or novel.

Respond in JSON format:
{
    "quote": "The quote text",
    "author": "Author name"
}"""
        try:
            parsed = await self.chat_service.complete_json(prompt, temperature=0.9)
        except Exception as e:
            logger.error(f"Error fetching quote of the day: {e}")
            return MOCK_QUOTE

        quote = parsed.get("quote")
        author = parsed.get("author")
        if not (isinstance(quote, str) and quote.strip() and isinstance(author, str) and author.strip()):
            logger.warning(f"Quote of the day response was incomplete, using fixture quote: {parsed}")
            return MOCK_QUOTE
        return Quote(quote=quote.strip(), author=author.strip())

    async def generate_quiz_question(self, word: Word) -> QuizQuestion:
        prompt = f"""Create a multiple-choice question to test the user's knowledge of the word "{word.word}".
The definition is: "{word.definition}".
Pose the definition as the question. Provide three plausible incorrect options and
include the correct word as one of the options. The options should be single words.

Respond in JSON format:
{{
    "question": "The definition of the word, posed as a question",
    "options": ["option1", "option2", "option3", "option4"],
    "correct_answer": "{word.word}"
}}"""
        try:
            parsed = await self.chat_service.complete_json(prompt, temperature=0.7)
            return QuizQuestion(
                word=word.word,
                definition=parsed.get("question"),
                options=parsed.get("options"),
                correct_answer=parsed.get("correct_answer")
            )
        except Exception as e:
            logger.error(f"Error generating quiz question for '{word.word}': {e}")
            return MOCK_QUIZ_QUESTION

    async def get_synonym_antonym_pair(self) -> SwipeItem:
        prompt = """Generate two English words. With a 50% probability, they should be synonyms.
With a 50% probability, they should be antonyms or unrelated. Don't pick extremely obscure words.

Respond in JSON format:
{
    "word1": "first word",
    "word2": "second word",
    "are_synonyms": true
}"""
        try:
            parsed = await self.chat_service.complete_json(prompt, temperature=1.0)
            return SwipeItem(**parsed)
        except Exception as e:
            logger.error(f"Error generating swipe pair: {e}")
            return MOCK_SWIPE_ITEM

    async def find_words_from_description(self, description: str) -> list[str]:
        prompt = f"""Based on the following definition or concept, suggest a list of 3-5 relevant English words:
"{description}"

Respond in JSON format:
{{
    "words": ["word1", "word2", "word3"]
}}"""
        try:
            parsed = await self.chat_service.complete_json(prompt, temperature=0.5)
        except Exception as e:
            logger.error(f"Error with reverse dictionary: {e}")
            return list(MOCK_REVERSE_SEARCH_RESULT)

        words = parsed.get("words")
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            logger.warning(f"Reverse dictionary response was malformed, using fixture words: {parsed}")
            return list(MOCK_REVERSE_SEARCH_RESULT)
        return [w.strip() for w in words if w.strip()]

    async def get_word_details(self, word: str) -> Optional[Word]:
        prompt = f"""Provide me with the details for the English word "{word}".
If the word is not a valid English word, return an empty object.
Include its pronunciation, definition, an example sentence, and a few synonyms.

Respond in JSON format:
{{
    "word": "the word",
    "pronunciation": "/phonetic transcription/",
    "definition": "Short definition",
    "example": "An example sentence using the word",
    "synonyms": ["synonym1", "synonym2", "synonym3"]
}}"""
        try:
            parsed = await self.chat_service.complete_json(prompt, temperature=0.2)
        except ContentFormatError as e:
            logger.info(f"Malformed details for '{word}', treating as not found: {e}")
            return None
        except Exception as e:
            logger.error(f"Error fetching details for '{word}': {e}")
            raise ContentUnavailableError("Failed to fetch word details.") from e

        return word_from_payload(parsed)


def create_content_gateway(settings: Settings | None = None) -> ContentGateway:
    """Pick the gateway implementation from configuration."""
    settings = settings or get_settings()
    if settings.remote_content_enabled:
        provider = "Azure OpenAI" if settings.use_azure_openai else "OpenAI"
        logger.info(f"Using remote content gateway ({provider})")
        return RemoteContentGateway(ChatCompletionService(settings))

    logger.warning("No content service API key set. Using fixture content.")
    return FixtureContentGateway()
