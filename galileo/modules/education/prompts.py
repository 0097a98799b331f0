"""System instructions and prompt builders for each study artifact."""

from __future__ import annotations


SYSTEM_PROMPT = (
    "You are Galileo, a brilliant educator and scientist. Your role is to make "
    "complex concepts accessible and engaging for students. "
    "Always provide clear, accurate, and educational content. "
    "When creating structured responses, follow the exact format requested. "
    "Be encouraging and supportive in your explanations."
)


def explain_instruction(topic: str) -> str:
    return (
        f'Explain the scientific concept "{topic.strip()}" in simple terms suitable for students.\n'
        "Provide key terms, a real-world example, and rate the difficulty level "
        "(Beginner/Intermediate/Advanced).\n"
        "Focus on making complex ideas accessible and engaging.\n\n"
        "Respond only with the ConceptExplanation object."
    )


def quiz_instruction(topic: str, question_count: int) -> str:
    return (
        f'Create a {int(question_count)}-question multiple choice quiz about "{topic.strip()}".\n'
        f"Return exactly {int(question_count)} questions. "
        "Each question must have exactly 4 options with one correct answer "
        "(correct_answer is a 0-based index, 0-3).\n"
        "Include educational explanations for the correct answers.\n"
        "Make questions appropriately challenging but fair.\n\n"
        "Respond only with the Quiz object."
    )


def flashcards_instruction(content: str, card_count: int) -> str:
    return (
        f"Create exactly {int(card_count)} flashcards from this content:\n"
        f'"""\n{content.strip()}\n"""\n'
        "Each flashcard should have a clear question or term on the front and a "
        "concise answer or definition on the back.\n"
        "Organize cards by logical categories and focus on the most important concepts.\n\n"
        "Respond only with the FlashcardSet object."
    )


def summarize_instruction(text: str) -> str:
    return (
        "Summarize this study material into key points:\n"
        f'"""\n{text.strip()}\n"""\n'
        "Extract the most important concepts and create a concise summary.\n"
        "Organize information in a student-friendly format with clear key points "
        "and important concepts.\n\n"
        "Respond only with the StudyNotes object."
    )
