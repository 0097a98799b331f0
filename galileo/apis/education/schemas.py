from __future__ import annotations

from pydantic import BaseModel, Field


class ExplainRequest(BaseModel):
    topic: str = Field(..., description="Concept to explain")


class QuizRequest(BaseModel):
    topic: str = Field(..., description="Quiz topic")
    question_count: int = Field(default=5, ge=1, description="Number of questions")


class FlashcardsRequest(BaseModel):
    content: str = Field(..., description="Topic or pasted study material")
    card_count: int = Field(default=10, ge=1, description="Number of cards")


class SummarizeRequest(BaseModel):
    text: str = Field(..., description="Notes to summarize")
