"""Education module exports."""

from .errors import EducationError, EmptyInput, GenerationFailure, InvalidCount
from .models import (
    ConceptExplanation,
    DifficultyLevel,
    Flashcard,
    FlashcardSet,
    Question,
    Quiz,
    StudyNotes,
)
from .service import EducationService

__all__ = [
    "ConceptExplanation",
    "DifficultyLevel",
    "EducationError",
    "EducationService",
    "EmptyInput",
    "Flashcard",
    "FlashcardSet",
    "GenerationFailure",
    "InvalidCount",
    "Question",
    "Quiz",
    "StudyNotes",
]
