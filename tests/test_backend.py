import pytest
from pydantic_ai.models.function import AgentInfo, FunctionModel
from pydantic_ai.models.test import TestModel

from galileo.modules.education.backend import GenerationSession, PydanticAIBackend
from galileo.modules.education.errors import GenerationFailure
from galileo.modules.education.models import Quiz, StudyNotes
from galileo.modules.education.prompts import SYSTEM_PROMPT
from galileo.modules.education.service import EducationService


NOTES_ARGS = {
    "title": "Photosynthesis",
    "key_points": ["Light energy becomes chemical energy"],
    "summary": "Plants store light as sugar.",
    "important_concepts": ["chlorophyll"],
}


async def test_generate_decodes_into_requested_schema():
    backend = PydanticAIBackend(TestModel(custom_output_args=NOTES_ARGS), retries=1)

    notes = await backend.generate(SYSTEM_PROMPT, "Summarize photosynthesis", StudyNotes)

    assert isinstance(notes, StudyNotes)
    assert notes.title == "Photosynthesis"
    assert notes.important_concepts == ["chlorophyll"]


async def test_same_agent_serves_every_schema():
    backend = PydanticAIBackend(TestModel(), retries=1)

    quiz = await backend.generate(SYSTEM_PROMPT, "Quiz me", Quiz)
    notes = await backend.generate(SYSTEM_PROMPT, "Summarize", StudyNotes)

    assert isinstance(quiz, Quiz)
    assert isinstance(notes, StudyNotes)
    assert list(backend._agents) == [SYSTEM_PROMPT]


async def test_prewarm_creates_agent_without_model_call():
    backend = PydanticAIBackend(TestModel(), retries=1)
    session = GenerationSession(backend, SYSTEM_PROMPT)

    await session.prewarm()

    assert backend.agent_for(SYSTEM_PROMPT) is backend._agents[SYSTEM_PROMPT]


def test_retries_default_from_settings(monkeypatch):
    from galileo.core.config import settings

    monkeypatch.setattr(settings, "generation_retries", 4)
    assert PydanticAIBackend(TestModel()).retries == 4


async def test_model_error_surfaces_as_generation_failure():
    def broken(messages, info: AgentInfo):
        raise ConnectionError("model offline")

    svc = EducationService(PydanticAIBackend(FunctionModel(broken), retries=1))

    with pytest.raises(GenerationFailure) as info:
        await svc.summarize_notes("Some notes")

    assert isinstance(info.value.cause, ConnectionError)


async def test_service_end_to_end_with_test_model():
    svc = EducationService(
        PydanticAIBackend(TestModel(custom_output_args=NOTES_ARGS), retries=1)
    )
    notes = await svc.summarize_notes("Photosynthesis converts light...")
    assert notes.summary == "Plants store light as sugar."
