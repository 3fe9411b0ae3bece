# This project was developed with assistance from AI tools.
"""Question-answering schemas."""

from pydantic import BaseModel, Field


class AskRequest(BaseModel):
    """A single question for the loan support assistant."""

    query: str = Field(min_length=1)
    top_k: int | None = Field(default=None, ge=1, description="Passages to retrieve.")


class AskResponse(BaseModel):
    answer: str
