"""Test doubles shared across test modules."""


TEST_EMAIL = "student@example.edu"


class FakeAnswerProvider:
    """Answer provider returning a canned answer (or raising) without I/O."""

    def __init__(self, answer: str = "Paris", error: Exception | None = None):
        self.answer = answer
        self.error = error
        self.questions: list[str] = []

    async def complete(self, question: str) -> str:
        self.questions.append(question)
        if self.error is not None:
            raise self.error
        return self.answer
