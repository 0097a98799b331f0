import pytest

from galileo.modules.education.models import (
    ConceptExplanation,
    FlashcardSet,
    Quiz,
    StudyNotes,
)
from galileo.modules.education.service import EducationService

from .helpers import StubBackend, make_flashcards, make_quiz


@pytest.fixture
def explanation() -> ConceptExplanation:
    return ConceptExplanation(
        concept="Gravity",
        simple_explanation="Masses attract each other.",
        key_terms=["mass", "force"],
        real_world_example="An apple falling from a tree.",
        difficulty_level="Beginner",
    )


@pytest.fixture
def notes() -> StudyNotes:
    return StudyNotes(
        title="Photosynthesis",
        key_points=["Light energy → chemical energy", "Occurs in chloroplasts"],
        summary="Plants turn light into chemical energy.",
        important_concepts=["chlorophyll", "ATP"],
    )


@pytest.fixture
def backend(explanation, notes) -> StubBackend:
    return StubBackend(
        outputs={
            ConceptExplanation: explanation,
            Quiz: make_quiz(5),
            FlashcardSet: make_flashcards(10),
            StudyNotes: notes,
        }
    )


@pytest.fixture
def service(backend) -> EducationService:
    return EducationService(backend)
