"""
LLM Client
Wrapper around an OpenAI-compatible chat completion API.
"""

import json
from typing import Optional

from loguru import logger
from openai import OpenAI, OpenAIError

from app.config import settings


class LLMError(Exception):
    """The language model could not produce a usable answer"""


class LLMClient:
    """
    OpenAI client wrapper

    Used for two things:
    - description sentiment analysis
    - improvement suggestions

    The SDK client is created on first use.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        """
        Args:
            api_key: API key (defaults to OPENAI_API_KEY)
            model: chat model name
            base_url: alternative OpenAI-compatible endpoint
            timeout: request timeout in seconds
        """
        self.api_key = api_key or settings.OPENAI_API_KEY
        self.model = model or settings.OPENAI_MODEL
        self.base_url = base_url or settings.OPENAI_BASE_URL
        self.timeout = timeout or settings.OPENAI_TIMEOUT
        self._client: Optional[OpenAI] = None
        self.logger = logger.bind(component="LLMClient")

    @property
    def is_available(self) -> bool:
        """True when an API key is configured"""
        return bool(self.api_key)

    def _get_client(self) -> OpenAI:
        if not self.is_available:
            raise LLMError("OPENAI_API_KEY is not set")

        if self._client is None:
            self.logger.info(f"Creating OpenAI client (model={self.model})")
            self._client = OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
            )
        return self._client

    def chat(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int = 512,
        json_mode: bool = False,
    ) -> str:
        """
        Runs a single chat completion.

        Args:
            system_prompt: system message
            user_prompt: user message
            max_tokens: completion token limit
            json_mode: request a JSON object response

        Returns:
            the assistant message text

        Raises:
            LLMError: the client is unavailable or the request failed
        """
        client = self._get_client()

        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                max_tokens=max_tokens,
                **kwargs,
            )
        except OpenAIError as e:
            self.logger.error(f"Chat completion failed: {e}")
            raise LLMError(str(e)) from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise LLMError("Empty response from the model")
        return content.strip()

    def extract_json(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int = 1024,
    ) -> dict:
        """
        Requests a JSON object and parses it.

        Raises:
            LLMError: the response is not a JSON object
        """
        response = self.chat(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            max_tokens=max_tokens,
            json_mode=True,
        )
        return parse_json_object(response)


def parse_json_object(text: str) -> dict:
    """Parses a JSON object, tolerating ```json fences around it"""
    if "```json" in text:
        text = text.split("```json")[1].split("```")[0]
    elif "```" in text:
        text = text.split("```")[1].split("```")[0]

    try:
        data = json.loads(text.strip())
    except json.JSONDecodeError as e:
        logger.warning(f"JSON parsing failed: {text[:100]}")
        raise LLMError(f"Invalid JSON from the model: {e}") from e

    if not isinstance(data, dict):
        raise LLMError(f"Expected a JSON object, got {type(data).__name__}")
    return data


# singleton
_client: Optional[LLMClient] = None


def get_llm_client() -> LLMClient:
    """Returns the shared LLM client"""
    global _client
    if _client is None:
        _client = LLMClient()
    return _client


def set_llm_client(client: Optional[LLMClient]) -> None:
    """Replaces the shared LLM client (None resets it)"""
    global _client
    _client = client
