"""The fixed profiling question asked of every new user."""

from typing import List

from pydantic import BaseModel, Field


class ProfilingQuestion(BaseModel):
    """A question together with the only answers it accepts."""

    question: str = Field(..., min_length=1, description="Question shown to the user")
    options: List[str] = Field(..., min_length=1, description="Allowed answers")

    model_config = {"frozen": True}

    def invalid_choices(self, choices: List[str]) -> List[str]:
        """Return the choices that are not one of the allowed options."""
        return [choice for choice in choices if choice not in self.options]


DEFAULT_PROFILING_QUESTION = ProfilingQuestion(
    question="What are your goals in Fam.ly?",
    options=[
        "Learn family history",
        "Connect more often",
        "Learn others' interests",
        "Learn about identity",
    ],
)
