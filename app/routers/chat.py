from fastapi import APIRouter

from app.dependencies import ChatDep
from app.schemas.chat import ChatRequest, ChatResponse

router = APIRouter(prefix="/api")


@router.post("/chat", response_model=ChatResponse)
async def chat(service: ChatDep, request: ChatRequest | None = None) -> ChatResponse:
    message = request.message if request else ""
    return ChatResponse(reply=await service.reply(message))
