"""Education service: prompt templates plus schema-constrained generation.

Each operation validates its input, builds a prompt, and makes exactly one
backend call with the matching output schema. The backend is trusted to
return a value of that schema; nothing is post-processed.

Example (async):
    svc = EducationService()
    quiz = await svc.generate_quiz("Photosynthesis", question_count=5)
"""

from __future__ import annotations

from typing import Optional

from galileo.core.logging import get_logger
from galileo.modules.education import prompts
from galileo.modules.education.backend import (
    GenerationBackend,
    GenerationSession,
    OutputT,
    PydanticAIBackend,
)
from galileo.modules.education.errors import EmptyInput, GenerationFailure, InvalidCount
from galileo.modules.education.models import (
    ConceptExplanation,
    FlashcardSet,
    Quiz,
    StudyNotes,
)

logger = get_logger(__name__)


def _require_text(field: str, value: str) -> str:
    if value is None or not value.strip():
        raise EmptyInput(field)
    return value


def _require_count(field: str, count: int) -> int:
    if int(count) < 1:
        raise InvalidCount(field, int(count))
    return int(count)


class EducationService:
    """Generates explanations, quizzes, flashcards and study notes."""

    def __init__(self, backend: Optional[GenerationBackend] = None) -> None:
        self.session = GenerationSession(
            backend or PydanticAIBackend(), prompts.SYSTEM_PROMPT
        )

    async def prewarm(self) -> None:
        await self.session.prewarm()

    async def _respond(self, kind: str, prompt: str, schema: type[OutputT]) -> OutputT:
        try:
            return await self.session.respond(prompt, schema)
        except Exception as exc:
            raise GenerationFailure(kind, exc) from exc

    async def explain_concept(self, topic: str) -> ConceptExplanation:
        topic = _require_text("topic", topic)
        logger.info("Explaining concept (%d chars)", len(topic))
        return await self._respond(
            "explanation", prompts.explain_instruction(topic), ConceptExplanation
        )

    async def generate_quiz(self, topic: str, question_count: int = 5) -> Quiz:
        topic = _require_text("topic", topic)
        question_count = _require_count("question_count", question_count)
        logger.info("Generating %d-question quiz (%d chars)", question_count, len(topic))
        return await self._respond(
            "quiz", prompts.quiz_instruction(topic, question_count), Quiz
        )

    async def create_flashcards(self, content: str, card_count: int = 10) -> FlashcardSet:
        content = _require_text("content", content)
        card_count = _require_count("card_count", card_count)
        logger.info("Creating %d flashcards (%d chars)", card_count, len(content))
        return await self._respond(
            "flashcards", prompts.flashcards_instruction(content, card_count), FlashcardSet
        )

    async def summarize_notes(self, text: str) -> StudyNotes:
        text = _require_text("text", text)
        logger.info("Summarizing notes (%d chars)", len(text))
        return await self._respond(
            "notes", prompts.summarize_instruction(text), StudyNotes
        )
