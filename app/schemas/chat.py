from pydantic import BaseModel, field_validator


class ChatRequest(BaseModel):
    message: str = ""

    @field_validator("message", mode="before")
    @classmethod
    def _coerce_message(cls, value):
        if isinstance(value, str):
            return value
        return str(value) if value else ""


class ChatResponse(BaseModel):
    reply: str
