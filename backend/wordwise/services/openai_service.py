"""
OpenAI Chat Service
Async chat-completion client (OpenAI or Azure OpenAI) that returns
structured JSON content for the content gateway.
"""
import json
import logging
from typing import Optional
from openai import AsyncAzureOpenAI, AsyncOpenAI

from wordwise.config import Settings, get_settings

logger = logging.getLogger(__name__)


class ContentFormatError(ValueError):
    """The model answered, but no JSON object could be recovered."""


def parse_json_object(text: Optional[str]) -> dict:
    """
    Parse a JSON object from a model response.

    Tries the whole text first, then the outermost {...} span.

    Raises:
        ContentFormatError: if no JSON object can be recovered
    """
    if not text:
        raise ContentFormatError("Empty response from content service")
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        start = text.find('{')
        end = text.rfind('}') + 1
        if start == -1 or end <= start:
            raise ContentFormatError("Failed to parse JSON from response")
        try:
            parsed = json.loads(text[start:end])
        except json.JSONDecodeError as e:
            raise ContentFormatError(f"Failed to parse JSON from response: {e}") from e
    if not isinstance(parsed, dict):
        raise ContentFormatError(f"Expected a JSON object, got {type(parsed).__name__}")
    return parsed


class ChatCompletionService:
    """Service for JSON chat completions"""

    def __init__(self, settings: Settings | None = None, client=None):
        self.settings = settings or get_settings()
        if client is not None:
            self.client = client
        elif self.settings.use_azure_openai:
            self.client = AsyncAzureOpenAI(
                api_key=self.settings.AZURE_OPENAI_API_KEY,
                api_version=self.settings.AZURE_OPENAI_API_VERSION,
                azure_endpoint=self.settings.AZURE_OPENAI_ENDPOINT
            )
        else:
            self.client = AsyncOpenAI(api_key=self.settings.OPENAI_API_KEY)

        if self.settings.use_azure_openai:
            self.model = self.settings.AZURE_OPENAI_DEPLOYMENT_NAME
        else:
            self.model = self.settings.OPENAI_MODEL
        self.max_tokens = self.settings.CONTENT_MAX_TOKENS
        self.temperature = self.settings.CONTENT_TEMPERATURE

    async def chat_completion(
        self,
        messages: list[dict],
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None
    ) -> str:
        """
        Send a chat completion request asking for a JSON object.

        Args:
            messages: List of message dicts with 'role' and 'content'
            max_tokens: Override default max_tokens
            temperature: Override default temperature

        Returns:
            The assistant's response text
        """
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=max_tokens or self.max_tokens,
                temperature=self.temperature if temperature is None else temperature,
                response_format={"type": "json_object"}
            )
            return response.choices[0].message.content
        except Exception as e:
            logger.error(f"Chat completion error: {e}")
            raise

    async def complete_json(
        self,
        prompt: str,
        system_prompt: str = "You are an expert English vocabulary teacher. Always respond with valid JSON.",
        temperature: Optional[float] = None
    ) -> dict:
        """
        Ask for a JSON object and parse it.

        Raises:
            ContentFormatError: if the answer holds no JSON object
            openai.OpenAIError: on transport or API failures
        """
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt}
        ]
        response = await self.chat_completion(messages, temperature=temperature)
        return parse_json_object(response)
