"""
Pytest configuration and fixtures for tests.
"""
import random

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from wordwise.config import Settings
from wordwise.core.dependencies import get_view_controller
from wordwise.core.progress_store import ProgressStore
from wordwise.main import app
from wordwise.services.content_gateway import (
    ContentGateway,
    FixtureContentGateway,
    MOCK_DICTIONARY_WORD,
    MOCK_QUIZ_QUESTION,
    MOCK_QUOTE,
    MOCK_REVERSE_SEARCH_RESULT,
    MOCK_SWIPE_ITEM,
    MOCK_WORD
)
from wordwise.services.daily_cache import DailyCache
from wordwise.services.word_catalog import get_word_catalog
from wordwise.views.controller import ViewController


@pytest.fixture
def test_settings(tmp_path):
    """Settings for tests: no remote provider, no swipe delay, cache in tmp."""
    return Settings(
        OPENAI_API_KEY=None,
        AZURE_OPENAI_API_KEY=None,
        AZURE_OPENAI_ENDPOINT=None,
        SWIPE_FEEDBACK_DELAY_SECONDS=0,
        DAILY_CACHE_FILE=str(tmp_path / "daily_content.json")
    )


@pytest.fixture
def catalog():
    """The packaged seven-word catalog."""
    return get_word_catalog()


@pytest.fixture
def store(catalog):
    """Progress store with the demo seed (Benevolent learned, Serendipity bookmarked, 15/18)."""
    return ProgressStore.seeded(catalog)


@pytest.fixture
def empty_store(catalog):
    """Progress store with nothing learned or answered."""
    return ProgressStore(catalog)


@pytest.fixture
def fixture_gateway():
    return FixtureContentGateway()


@pytest.fixture
def mock_gateway():
    """Content gateway mock returning the fixture content."""
    gateway = AsyncMock(spec=ContentGateway)
    gateway.name = "mock"
    gateway.get_word_of_the_day.return_value = MOCK_WORD
    gateway.get_vocabulary_quote.return_value = MOCK_QUOTE
    gateway.generate_quiz_question.return_value = MOCK_QUIZ_QUESTION
    gateway.get_synonym_antonym_pair.return_value = MOCK_SWIPE_ITEM
    gateway.find_words_from_description.return_value = list(MOCK_REVERSE_SEARCH_RESULT)
    gateway.get_word_details.return_value = MOCK_DICTIONARY_WORD
    return gateway


@pytest.fixture
def mock_chat_service():
    """Chat-completion service mock; set complete_json.return_value per test."""
    service = AsyncMock()
    service.complete_json.return_value = {}
    return service


@pytest.fixture
def cache(tmp_path):
    return DailyCache(tmp_path / "daily_content.json")


@pytest.fixture
def controller(store, fixture_gateway, cache, test_settings):
    """View controller over the seeded store and fixture content."""
    return ViewController(
        progress=store,
        gateway=fixture_gateway,
        cache=cache,
        settings=test_settings,
        rng=random.Random(7)
    )


@pytest.fixture
def client(controller):
    """TestClient whose endpoints use the test controller."""
    app.dependency_overrides[get_view_controller] = lambda: controller
    yield TestClient(app)
    app.dependency_overrides.clear()
