"""Galileo: structured study material (explanations, quizzes, flashcards, notes)."""
