"""Pydantic models for the four generated study artifacts.

These classes double as the structured-output schemas handed to the model, so
they stay free of length/range constraints (Gemini's schema support is
limited). Field descriptions are forwarded in the JSON schema and act as
per-field guidance for the model.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class DifficultyLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class ConceptExplanation(BaseModel):
    """A student-friendly explanation of a single concept."""

    concept: str = Field(..., description="Name of the concept being explained")
    simple_explanation: str = Field(
        ..., description="Plain-language explanation suitable for students"
    )
    key_terms: list[str] = Field(..., description="Important terms a student should know")
    real_world_example: str = Field(
        ..., description="One concrete example from everyday life"
    )
    difficulty_level: str = Field(
        ..., description="One of: Beginner, Intermediate, Advanced"
    )


class Question(BaseModel):
    """A single multiple-choice question."""

    question: str
    options: list[str] = Field(..., description="Exactly 4 answer options")
    correct_answer: int = Field(
        ..., description="0-based index of the correct option"
    )
    explanation: str = Field(..., description="Why the correct option is correct")

    @property
    def correct_option(self) -> Optional[str]:
        if 0 <= self.correct_answer < len(self.options):
            return self.options[self.correct_answer]
        return None

    def is_correct(self, index: int) -> bool:
        return index == self.correct_answer


class Quiz(BaseModel):
    title: str
    subject: str
    questions: list[Question]


class Flashcard(BaseModel):
    """Term or question on the front, concise answer on the back."""

    front: str
    back: str
    category: str = Field(..., description="Logical group the card belongs to")


class FlashcardSet(BaseModel):
    title: str
    subject: str
    cards: list[Flashcard]

    @property
    def categories(self) -> list[str]:
        seen: list[str] = []
        for card in self.cards:
            if card.category not in seen:
                seen.append(card.category)
        return seen


class StudyNotes(BaseModel):
    title: str
    key_points: list[str]
    summary: str = Field(..., description="Concise summary of the material")
    important_concepts: list[str]
