"""AI adapter - one-word answers from a chat completion provider."""

from .client import (
    AnswerProvider,
    OpenAIChatProvider,
    extract_single_word,
    ask_one_word,
)
from .exceptions import ProviderError


__all__ = [
    "AnswerProvider",
    "OpenAIChatProvider",
    "extract_single_word",
    "ask_one_word",
    "ProviderError",
]
