# Role: Thin HTTP adapter for the widget's chat endpoint. Validates request/response shapes and delegates the
# reply to ConciergeResponder. Any responder failure becomes a 500 with a friendly reply body.

from typing import List, Literal, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

import backend.config as config
from backend.api.deps import get_responder
from backend.core.concierge import ConciergeResponder

router = APIRouter(tags=["chat"])

ERROR_REPLY = "Our concierge had trouble responding just now. Please try again shortly."


class HistoryItem(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)
    history: List[HistoryItem] = Field(default_factory=list)


class ChatResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    reply: str
    follow_up_suggestions: Optional[List[str]] = Field(default=None, alias="followUpSuggestions")


@router.post("/api/chat", response_model=ChatResponse, response_model_by_alias=True)
def chat(req: ChatRequest, responder: ConciergeResponder = Depends(get_responder)):
    # 1) Forward (message, history) to the responder
    # 2) Return reply + follow-ups in the widget's camelCase schema
    # 3) On any failure, log and answer 500 with a safe reply
    try:
        result = responder.respond(req.message, [h.model_dump() for h in req.history])
    except Exception as e:
        print(f"[chat] concierge failed: {e!r}")
        if config.DEBUG:
            print("REQUEST:", req.model_dump())
        return JSONResponse(status_code=500, content={"reply": ERROR_REPLY})

    return ChatResponse(reply=result.reply, follow_up_suggestions=result.follow_up_suggestions)
