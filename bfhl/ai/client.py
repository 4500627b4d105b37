"""HTTP client for the one-word chat completion provider."""

import re
from typing import Any, Protocol

import httpx

from bfhl.config import Settings
from .exceptions import ProviderError


SYSTEM_PROMPT = "Answer with ONLY ONE WORD. No explanation."
PROVIDER_NAME = "openai"

_NON_WORD_RE = re.compile(r"[^A-Za-z0-9_]")


class AnswerProvider(Protocol):
    """Anything that can answer a question with a short piece of text."""

    async def complete(self, question: str) -> str:
        """Return the raw answer text for ``question``.

        Raises:
            ProviderError: If no answer could be obtained.
        """
        ...


class OpenAIChatProvider:
    """Answer provider backed by an OpenAI-compatible chat completions API.
    
    Attributes:
        client: Shared HTTP client.
        api_key: Bearer token for the provider.
        api_base: Base URL, without the ``/chat/completions`` suffix.
        model: Model identifier.
        max_tokens: Completion token cap.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        api_base: str,
        model: str,
        max_tokens: int = 10,
        timeout: float = 30.0,
    ) -> None:
        self.client = client
        self.api_key = api_key
        self.api_base = api_base
        self.model = model
        self.max_tokens = max_tokens
        self.timeout = timeout

    @classmethod
    def from_settings(cls, client: httpx.AsyncClient, settings: Settings) -> "OpenAIChatProvider":
        """Build a provider from application settings."""
        return cls(
            client=client,
            api_key=settings.OPENAI_API_KEY,
            api_base=settings.OPENAI_API_BASE,
            model=settings.OPENAI_MODEL,
            max_tokens=settings.AI_MAX_TOKENS,
            timeout=settings.AI_TIMEOUT_SECONDS,
        )

    @property
    def endpoint(self) -> str:
        return self.api_base.rstrip("/") + "/chat/completions"

    def build_payload(self, question: str) -> dict[str, Any]:
        """Build the chat completion request body."""
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": question},
            ],
            "max_tokens": self.max_tokens,
        }

    async def complete(self, question: str) -> str:
        """Ask the provider ``question`` and return its raw answer text.
        
        Args:
            question: Trimmed, non-empty question.
            
        Returns:
            Message content of the first choice.
            
        Raises:
            ProviderError: On missing credentials, timeout, connection
                failure, HTTP error status, malformed or empty response.
        """
        if not self.api_key:
            raise ProviderError(PROVIDER_NAME, "API key not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            response = await self.client.post(
                self.endpoint,
                json=self.build_payload(question),
                headers=headers,
                timeout=self.timeout,
            )
        except httpx.TimeoutException:
            raise ProviderError(PROVIDER_NAME, f"timed out after {self.timeout}s")
        except httpx.RequestError as e:
            raise ProviderError(PROVIDER_NAME, f"request failed: {e}")

        if response.status_code >= 400:
            raise ProviderError(
                PROVIDER_NAME,
                f"returned error {response.status_code}: {response.text[:200]}",
            )

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ProviderError(PROVIDER_NAME, f"malformed response: {e!r}") from e

        if not isinstance(content, str) or not content.strip():
            raise ProviderError(PROVIDER_NAME, "empty response content")

        return content


def extract_single_word(text: str) -> str:
    """Reduce a completion to its first word, keeping only ``[A-Za-z0-9_]``.

    >>> extract_single_word("  Paris.  is the capital")
    'Paris'
    """
    tokens = text.strip().split()
    if not tokens:
        return ""
    return _NON_WORD_RE.sub("", tokens[0])


async def ask_one_word(provider: AnswerProvider, question: str) -> str:
    """Ask ``provider`` a question and return the sanitized one-word answer."""
    answer = await provider.complete(question)
    return extract_single_word(answer)
