# routers/chat.py
from fastapi import APIRouter, Depends, HTTPException, Request

from models import User
from schemas import ChatRequest, ChatResponse
from deps import get_current_active_user
from services.chat import ChatBackend, ChatBackendError

router = APIRouter(prefix="/api", tags=["chat"])

def get_chat_backend(request: Request) -> ChatBackend:
    backend = getattr(request.app.state, "chat_backend", None)
    if backend is None:
        raise HTTPException(status_code=503, detail="Chat backend is not configured")
    return backend

@router.post("/chat", response_model=ChatResponse)
async def chat(
    payload: ChatRequest,
    user: User = Depends(get_current_active_user),
    backend: ChatBackend = Depends(get_chat_backend),
):
    try:
        reply = await backend.complete([m.model_dump() for m in payload.messages])
    except ChatBackendError:
        raise HTTPException(status_code=502, detail="Chat backend request failed")
    if not reply:
        raise HTTPException(status_code=502, detail="Chat backend returned an empty reply")
    return {"message": {"role": "assistant", "content": reply}}
