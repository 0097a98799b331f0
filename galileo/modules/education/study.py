"""In-memory study state for a generated quiz or flashcard set.

Nothing here talks to a model; these hold the answer-selection and card
navigation state a client keeps while a student works through an artifact.
Flashcard navigation wraps from the last card back to the first; the previous
button stops at the first card.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from galileo.modules.education.models import Flashcard, Quiz


@dataclass
class QuizAttempt:
    quiz: Quiz
    current_index: int = 0
    answers: dict[int, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.quiz.questions)

    @property
    def finished(self) -> bool:
        return self.total > 0 and len(self.answers) == self.total

    def select(self, answer_index: int) -> None:
        """Record (or overwrite) the answer for the current question."""
        if not self.quiz.questions:
            raise IndexError("quiz has no questions")
        self.answers[self.current_index] = answer_index

    def advance(self) -> bool:
        """Move to the next question; only once the current one is answered."""
        if self.current_index not in self.answers:
            return False
        if self.current_index + 1 >= self.total:
            return False
        self.current_index += 1
        return True

    def previous(self) -> bool:
        if self.current_index == 0:
            return False
        self.current_index -= 1
        return True

    def answer_for(self, index: int) -> Optional[int]:
        return self.answers.get(index)

    @property
    def score(self) -> int:
        return sum(
            1
            for i, q in enumerate(self.quiz.questions)
            if i in self.answers and q.is_correct(self.answers[i])
        )

    @property
    def percentage(self) -> float:
        if not self.total:
            return 0.0
        return self.score / self.total * 100

    def reset(self) -> None:
        self.current_index = 0
        self.answers.clear()


@dataclass
class FlashcardDeck:
    cards: list[Flashcard]
    index: int = 0
    show_back: bool = False

    @property
    def current(self) -> Flashcard:
        if not self.cards:
            raise IndexError("deck is empty")
        return self.cards[self.index]

    @property
    def position(self) -> int:
        # 1-based, for display
        return self.index + 1

    def flip(self) -> bool:
        self.show_back = not self.show_back
        return self.show_back

    def next(self) -> Flashcard:
        if self.cards:
            self.index = (self.index + 1) % len(self.cards)
        self.show_back = False
        return self.current

    def previous(self) -> Flashcard:
        if self.index > 0:
            self.index -= 1
        self.show_back = False
        return self.current
