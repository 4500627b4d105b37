"""Global dependencies for the application."""

from typing import Annotated

import httpx
from fastapi import Depends, Request

from .ai import AnswerProvider, OpenAIChatProvider
from .config import Settings


def get_app_settings(request: Request) -> Settings:
    """Dependency to get the settings the app was created with.
    
    Args:
        request: The FastAPI request object.
        
    Returns:
        The immutable Settings stored on app state by ``create_app``.
    """
    return request.app.state.settings


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """Dependency to get the shared HTTP client opened by the app lifespan."""
    return request.app.state.http_client


async def get_answer_provider(
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AnswerProvider:
    """Dependency to build the answer provider for the ``AI`` operation.
    
    Args:
        client: Shared HTTP client.
        settings: Application settings.
        
    Returns:
        An OpenAIChatProvider bound to the shared HTTP client.
    """
    return OpenAIChatProvider.from_settings(client=client, settings=settings)
