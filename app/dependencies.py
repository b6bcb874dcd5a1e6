from typing import Annotated

from fastapi import Depends, Request

from app.services.chat import ChatService


def get_chat_service(request: Request) -> ChatService:
    return request.app.state.chat_service


ChatDep = Annotated[ChatService, Depends(get_chat_service)]
