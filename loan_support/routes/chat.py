# This project was developed with assistance from AI tools.
"""Question-answering route."""

from fastapi import APIRouter

from ..schemas.chat import AskRequest, AskResponse
from ..services.chat import answer_question

router = APIRouter()


@router.post("/chat/ask", response_model=AskResponse)
async def ask(req: AskRequest) -> AskResponse:
    """Answer a loan question. A missing or empty ``query`` is rejected with 400."""
    return await answer_question(req)
