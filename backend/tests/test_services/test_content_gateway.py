"""
Tests for the content gateways.
"""
import pytest
from unittest.mock import MagicMock, patch

from wordwise.config import Settings
from wordwise.core.errors import ContentUnavailableError
from wordwise.services.content_gateway import (
    FixtureContentGateway,
    MOCK_QUIZ_QUESTION,
    MOCK_QUOTE,
    MOCK_REVERSE_SEARCH_RESULT,
    MOCK_SWIPE_ITEM,
    MOCK_WORD,
    RemoteContentGateway,
    create_content_gateway,
    word_from_payload
)
from wordwise.services.openai_service import ContentFormatError


VALID_WORD_PAYLOAD = {
    "word": "Petrichor",
    "pronunciation": "/ˈpɛtrɪkɔːr/",
    "definition": "A pleasant smell after rain.",
    "example": "The petrichor filled the air.",
    "synonyms": ["rain scent"]
}


class TestWordFromPayload:
    """Tests for word_from_payload"""

    def test_complete_payload(self):
        word = word_from_payload(VALID_WORD_PAYLOAD)
        assert word.word == "Petrichor"
        assert word.difficulty == "medium"

    @pytest.mark.parametrize("field", ["word", "pronunciation", "definition", "example"])
    def test_missing_field(self, field):
        payload = {k: v for k, v in VALID_WORD_PAYLOAD.items() if k != field}
        assert word_from_payload(payload) is None

    def test_blank_field(self):
        assert word_from_payload({**VALID_WORD_PAYLOAD, "definition": "  "}) is None

    def test_synonyms_must_be_list(self):
        assert word_from_payload({**VALID_WORD_PAYLOAD, "synonyms": "rain scent"}) is None

    def test_empty_object(self):
        assert word_from_payload({}) is None


class TestFixtureContentGateway:
    """Tests for FixtureContentGateway"""

    @pytest.mark.asyncio
    async def test_fixture_content(self, fixture_gateway, catalog):
        assert await fixture_gateway.get_word_of_the_day() == MOCK_WORD
        assert await fixture_gateway.get_vocabulary_quote() == MOCK_QUOTE
        assert await fixture_gateway.generate_quiz_question(catalog[0]) == MOCK_QUIZ_QUESTION
        assert await fixture_gateway.get_synonym_antonym_pair() == MOCK_SWIPE_ITEM
        assert await fixture_gateway.find_words_from_description("a list of words") == [
            "Vocabulary", "Lexicon", "Glossary"
        ]

    @pytest.mark.asyncio
    async def test_word_details_known_query(self, fixture_gateway):
        word = await fixture_gateway.get_word_details(" QUERY ")
        assert word.word == "Query"

    @pytest.mark.asyncio
    async def test_word_details_unknown_word(self, fixture_gateway):
        assert await fixture_gateway.get_word_details("xyzzy") is None


class TestRemoteContentGateway:
    """Tests for RemoteContentGateway with a mocked chat service"""

    @pytest.mark.asyncio
    async def test_word_of_the_day(self, mock_chat_service):
        mock_chat_service.complete_json.return_value = {**VALID_WORD_PAYLOAD}
        gateway = RemoteContentGateway(mock_chat_service)

        word = await gateway.get_word_of_the_day()

        assert word.word == "Petrichor"
        assert word.difficulty == "medium"

    @pytest.mark.asyncio
    async def test_word_of_the_day_incomplete_uses_fixture(self, mock_chat_service):
        mock_chat_service.complete_json.return_value = {"word": "Petrichor"}
        gateway = RemoteContentGateway(mock_chat_service)
        assert await gateway.get_word_of_the_day() == MOCK_WORD

    @pytest.mark.asyncio
    async def test_word_of_the_day_failure_uses_fixture(self, mock_chat_service):
        mock_chat_service.complete_json.side_effect = RuntimeError("network down")
        gateway = RemoteContentGateway(mock_chat_service)
        assert await gateway.get_word_of_the_day() == MOCK_WORD

    @pytest.mark.asyncio
    async def test_quote(self, mock_chat_service):
        mock_chat_service.complete_json.return_value = {"quote": "Words matter.", "author": "Someone"}
        gateway = RemoteContentGateway(mock_chat_service)
        quote = await gateway.get_vocabulary_quote()
        assert quote.author == "Someone"

    @pytest.mark.asyncio
    async def test_quote_incomplete_uses_fixture(self, mock_chat_service):
        mock_chat_service.complete_json.return_value = {"quote": "Words matter."}
        gateway = RemoteContentGateway(mock_chat_service)
        assert await gateway.get_vocabulary_quote() == MOCK_QUOTE

    @pytest.mark.asyncio
    async def test_quiz_question(self, mock_chat_service, catalog):
        mock_chat_service.complete_json.return_value = {
            "question": "Lasting for a very short time.",
            "options": ["Eternal", "Ephemeral", "Ancient", "Modern"],
            "correct_answer": "Ephemeral"
        }
        gateway = RemoteContentGateway(mock_chat_service)

        question = await gateway.generate_quiz_question(catalog[0])

        assert question.word == "Ephemeral"
        assert question.correct_answer in question.options

    @pytest.mark.asyncio
    async def test_invalid_quiz_question_uses_fixture(self, mock_chat_service, catalog):
        mock_chat_service.complete_json.return_value = {
            "question": "Lasting for a very short time.",
            "options": ["Eternal", "Ancient"],
            "correct_answer": "Ephemeral"
        }
        gateway = RemoteContentGateway(mock_chat_service)
        assert await gateway.generate_quiz_question(catalog[0]) == MOCK_QUIZ_QUESTION

    @pytest.mark.asyncio
    async def test_swipe_pair(self, mock_chat_service):
        mock_chat_service.complete_json.return_value = {
            "word1": "Hot", "word2": "Cold", "are_synonyms": False
        }
        gateway = RemoteContentGateway(mock_chat_service)
        pair = await gateway.get_synonym_antonym_pair()
        assert pair.are_synonyms is False

    @pytest.mark.asyncio
    async def test_swipe_pair_failure_uses_fixture(self, mock_chat_service):
        mock_chat_service.complete_json.side_effect = ContentFormatError("bad json")
        gateway = RemoteContentGateway(mock_chat_service)
        assert await gateway.get_synonym_antonym_pair() == MOCK_SWIPE_ITEM

    @pytest.mark.asyncio
    async def test_reverse_dictionary(self, mock_chat_service):
        mock_chat_service.complete_json.return_value = {"words": ["Nostalgia", "Longing", "Wistfulness"]}
        gateway = RemoteContentGateway(mock_chat_service)
        words = await gateway.find_words_from_description("a sentimental longing for the past")
        assert words == ["Nostalgia", "Longing", "Wistfulness"]

    @pytest.mark.asyncio
    async def test_reverse_dictionary_malformed_uses_fixture(self, mock_chat_service):
        mock_chat_service.complete_json.return_value = {"words": "Nostalgia"}
        gateway = RemoteContentGateway(mock_chat_service)
        words = await gateway.find_words_from_description("a sentimental longing for the past")
        assert words == list(MOCK_REVERSE_SEARCH_RESULT)


class TestRemoteWordDetails:
    """Word details raise on failure but report malformed answers as not found"""

    @pytest.mark.asyncio
    async def test_found(self, mock_chat_service):
        mock_chat_service.complete_json.return_value = {**VALID_WORD_PAYLOAD}
        gateway = RemoteContentGateway(mock_chat_service)
        word = await gateway.get_word_details("petrichor")
        assert word.word == "Petrichor"

    @pytest.mark.asyncio
    async def test_empty_object_is_not_found(self, mock_chat_service):
        mock_chat_service.complete_json.return_value = {}
        gateway = RemoteContentGateway(mock_chat_service)
        assert await gateway.get_word_details("xyzzy") is None

    @pytest.mark.asyncio
    async def test_unparseable_answer_is_not_found(self, mock_chat_service):
        mock_chat_service.complete_json.side_effect = ContentFormatError("no json")
        gateway = RemoteContentGateway(mock_chat_service)
        assert await gateway.get_word_details("xyzzy") is None

    @pytest.mark.asyncio
    async def test_incomplete_payload_is_not_found(self, mock_chat_service):
        mock_chat_service.complete_json.return_value = {
            **VALID_WORD_PAYLOAD, "synonyms": "rain smell"
        }
        gateway = RemoteContentGateway(mock_chat_service)
        assert await gateway.get_word_details("petrichor") is None

    @pytest.mark.asyncio
    async def test_service_failure_raises(self, mock_chat_service):
        mock_chat_service.complete_json.side_effect = RuntimeError("network down")
        gateway = RemoteContentGateway(mock_chat_service)

        with pytest.raises(ContentUnavailableError) as exc_info:
            await gateway.get_word_details("petrichor")

        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestCreateContentGateway:
    """Tests for create_content_gateway"""

    def test_fixture_without_key(self):
        settings = Settings(OPENAI_API_KEY=None, AZURE_OPENAI_API_KEY=None, AZURE_OPENAI_ENDPOINT=None)
        assert isinstance(create_content_gateway(settings), FixtureContentGateway)

    def test_remote_with_openai_key(self):
        settings = Settings(OPENAI_API_KEY="sk-test", AZURE_OPENAI_API_KEY=None, AZURE_OPENAI_ENDPOINT=None)
        with patch("wordwise.services.content_gateway.ChatCompletionService") as service_cls:
            service_cls.return_value = MagicMock()
            gateway = create_content_gateway(settings)

        assert isinstance(gateway, RemoteContentGateway)
        service_cls.assert_called_once_with(settings)
