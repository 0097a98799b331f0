from galileo.modules.education.backend import GenerationBackend
from galileo.modules.education.models import Flashcard, FlashcardSet, Question, Quiz


class StubBackend(GenerationBackend):
    """Records every call and answers from a schema -> value map."""

    def __init__(self, outputs=None, error=None):
        self.outputs = outputs or {}
        self.error = error
        self.calls = []
        self.prewarmed = []

    async def generate(self, instructions, prompt, schema):
        self.calls.append((instructions, prompt, schema))
        if self.error is not None:
            raise self.error
        return self.outputs[schema]

    async def prewarm(self, instructions):
        self.prewarmed.append(instructions)


def make_quiz(n: int) -> Quiz:
    return Quiz(
        title="Cell Biology",
        subject="Biology",
        questions=[
            Question(
                question=f"Question {i + 1}?",
                options=["A", "B", "C", "D"],
                correct_answer=i % 4,
                explanation="Because.",
            )
            for i in range(n)
        ],
    )


def make_flashcards(n: int) -> FlashcardSet:
    return FlashcardSet(
        title="Newton's Laws",
        subject="Physics",
        cards=[
            Flashcard(
                front=f"Term {i}",
                back=f"Definition {i}",
                category="Laws" if i % 2 else "Forces",
            )
            for i in range(n)
        ],
    )
