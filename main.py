# main.py (full, lifespan-based)
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from db import init_db, close_db, session_factory
from routers import auth, users, projects, chat
from services import config
from services.chat import create_chat_backend
from services.seeder import seed_if_empty

logger = logging.getLogger("uvicorn")

# ----- lifespan -----
@asynccontextmanager
async def lifespan(app: FastAPI):
    # 1) DB init
    await init_db(config.DB_URL)

    # 2) Seeds
    if config.SEED_ON_STARTUP:
        async with session_factory()() as session:
            await seed_if_empty(session, logger=logger.info)

    # 3) Chat backend (None -> /api/chat answers 503); tests may preset one
    if getattr(app.state, "chat_backend", None) is None:
        app.state.chat_backend = create_chat_backend()
    if app.state.chat_backend is None:
        logger.info("[chat] no ANTHROPIC_API_KEY configured, chat endpoint disabled")

    try:
        yield
    finally:
        await close_db()

# ----- app & routers -----
app = FastAPI(lifespan=lifespan, title=f"{config.APP_NAME} API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/", tags=["meta"])
async def welcome():
    return {"app": config.APP_NAME, "can_register": config.REGISTRATION_ENABLED}

app.include_router(auth.router)
app.include_router(users.router)
app.include_router(projects.router)
app.include_router(chat.router)

# Optional: print routes
for route in app.routes:
    if isinstance(route, APIRoute):
        logger.info("%s -> %s", list(route.methods), route.path)
