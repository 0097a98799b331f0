from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from galileo.apis.deps import get_education_service
from galileo.core.config import settings
from galileo.modules.education.errors import EmptyInput, GenerationFailure, InvalidCount
from galileo.modules.education.models import (
    ConceptExplanation,
    FlashcardSet,
    Quiz,
    StudyNotes,
)
from galileo.modules.education.service import EducationService
from .schemas import ExplainRequest, FlashcardsRequest, QuizRequest, SummarizeRequest


router = APIRouter(prefix=f"/{settings.app.version}/education", tags=["education"])

Service = Annotated[EducationService, Depends(get_education_service)]


async def _call(coro):
    try:
        return await coro
    except (EmptyInput, InvalidCount) as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)
        )
    except GenerationFailure as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))


@router.post("/explain", response_model=ConceptExplanation)
async def explain(req: ExplainRequest, svc: Service) -> ConceptExplanation:
    return await _call(svc.explain_concept(req.topic))


@router.post("/quiz", response_model=Quiz)
async def quiz(req: QuizRequest, svc: Service) -> Quiz:
    return await _call(svc.generate_quiz(req.topic, question_count=req.question_count))


@router.post("/flashcards", response_model=FlashcardSet)
async def flashcards(req: FlashcardsRequest, svc: Service) -> FlashcardSet:
    return await _call(svc.create_flashcards(req.content, card_count=req.card_count))


@router.post("/summarize", response_model=StudyNotes)
async def summarize(req: SummarizeRequest, svc: Service) -> StudyNotes:
    return await _call(svc.summarize_notes(req.text))
