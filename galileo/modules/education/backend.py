"""Generation backends for schema-constrained output.

The service only depends on :class:`GenerationBackend`; the pydantic-ai
implementation below is the default. Provider imports are kept lazy so the
module imports cleanly when credentials or optional provider extras are
missing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, TypeVar, Union

from pydantic import BaseModel
from pydantic_ai import Agent
from pydantic_ai.models import Model

from galileo.core.config import settings
from galileo.core.logging import get_logger

logger = get_logger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)


def _build_google_model():
    """Build Google Gemini model for pydantic-ai (lazy import)."""
    from pydantic_ai.models.google import GoogleModel
    from pydantic_ai.providers.google import GoogleProvider

    provider = GoogleProvider(api_key=settings.gemini_api_key)
    return GoogleModel(settings.gemini_model, provider=provider)


def _build_openrouter_model():
    """Build OpenRouter model via OpenAI-compatible provider (lazy import)."""
    from pydantic_ai.models.openai import OpenAIChatModel
    from pydantic_ai.providers.openai import OpenAIProvider

    if not settings.openrouter_api_key:
        raise RuntimeError(
            "OpenRouter API key not configured. Set OPENROUTER_API_KEY in your environment."
        )

    provider = OpenAIProvider(
        api_key=settings.openrouter_api_key,
        base_url="https://openrouter.ai/api/v1",
    )
    return OpenAIChatModel(settings.openrouter_model, provider=provider)


def build_model_by_settings():
    """Return a pydantic-ai Model based on configured provider selection."""
    provider = (settings.model_provider or "google").lower()
    if provider == "openrouter":
        return _build_openrouter_model()
    return _build_google_model()


class GenerationBackend(ABC):
    """Turns (instructions, prompt, schema) into an instance of ``schema``."""

    @abstractmethod
    async def generate(
        self, instructions: str, prompt: str, schema: type[OutputT]
    ) -> OutputT:
        """Generate a value that validates as ``schema``."""

    async def prewarm(self, instructions: str) -> None:
        """Hint that a session with these instructions will be used soon."""
        return None


class GenerationSession:
    """Fixed system instructions bound to one backend."""

    def __init__(self, backend: GenerationBackend, instructions: str) -> None:
        self.backend = backend
        self.instructions = instructions

    async def respond(self, prompt: str, schema: type[OutputT]) -> OutputT:
        return await self.backend.generate(self.instructions, prompt, schema)

    async def prewarm(self) -> None:
        await self.backend.prewarm(self.instructions)


class PydanticAIBackend(GenerationBackend):
    """Backend running a pydantic-ai agent with a per-call ``output_type``.

    One agent is kept per distinct instruction string; the schema is passed at
    run time so a single agent serves every artifact kind.

    Example:
        backend = PydanticAIBackend()
        notes = await backend.generate(SYSTEM_PROMPT, "Summarize ...", StudyNotes)
    """

    def __init__(
        self,
        model: Union[Model, str, None] = None,
        *,
        retries: Optional[int] = None,
    ) -> None:
        self._model = model
        self.retries = settings.generation_retries if retries is None else retries
        self._agents: dict[str, Agent[None, Any]] = {}

    @property
    def model(self) -> Union[Model, str]:
        if self._model is None:
            self._model = build_model_by_settings()
        return self._model

    def agent_for(self, instructions: str) -> Agent[None, Any]:
        agent = self._agents.get(instructions)
        if agent is None:
            agent = Agent(
                self.model,
                system_prompt=instructions,
                # Retry model responses that fail output validation
                retries=self.retries,
            )
            self._agents[instructions] = agent
        return agent

    async def generate(
        self, instructions: str, prompt: str, schema: type[OutputT]
    ) -> OutputT:
        agent = self.agent_for(instructions)
        res = await agent.run(prompt, output_type=schema)
        return res.output

    async def prewarm(self, instructions: str) -> None:
        self.agent_for(instructions)
        logger.debug("Prewarmed agent for model %s", self.model)
