# Role: FastAPI app bootstrap for the concierge backend. Loads environment config early, registers the chat
# router, and exposes discoverability/health endpoints.

from fastapi import FastAPI

import backend.config
backend.config.load_env()

from backend.api.chat import router as chat_router

app = FastAPI(title="BrightSteps Concierge API", version="0.1.0")
app.include_router(chat_router)


@app.get("/")
def root() -> dict:
    return {
        "message": "BrightSteps concierge API is running",
        "chat": "/api/chat",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
