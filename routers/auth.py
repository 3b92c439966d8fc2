from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import OAuth2PasswordRequestForm
from passlib.context import CryptContext
from jose import jwt, JWTError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from datetime import datetime, timedelta, timezone
import uuid

from db import get_session
from models import User
from schemas import Token, UserCreate, UserRead
from services import config

router = APIRouter(tags=["auth"])
pwd_ctx = CryptContext(schemes=["bcrypt"], deprecated="auto")

def create_token(data: dict, secret: str, expires: int) -> str:
    to_encode = data.copy()
    to_encode["exp"] = datetime.now(tz=timezone.utc) + timedelta(seconds=expires)
    return jwt.encode(to_encode, secret, algorithm=config.ALGORITHM)

def _token_pair(user: User) -> dict:
    data = {"sub": str(user.id)}
    return {
        "access_token": create_token(data, config.SECRET_KEY, config.ACCESS_EXPIRE),
        "refresh_token": create_token(data, config.REFRESH_SECRET, config.REFRESH_EXPIRE),
        "token_type": "bearer",
    }

async def _user_by_email(session: AsyncSession, email: str) -> User | None:
    return await session.scalar(select(User).where(User.email == email.lower()))

@router.post("/register", response_model=UserRead, status_code=201)
async def register(payload: UserCreate, session: AsyncSession = Depends(get_session)):
    if not config.REGISTRATION_ENABLED:
        raise HTTPException(status_code=404, detail="Registration is disabled")
    email = str(payload.email).lower()
    if await _user_by_email(session, email):
        raise HTTPException(status_code=400, detail="The email has already been taken.")
    user = User(name=payload.name, email=email, hashed_password=pwd_ctx.hash(payload.password))
    session.add(user)
    await session.commit()
    return UserRead.model_validate(user)

@router.post("/login/access-token", response_model=Token)
async def login(form: OAuth2PasswordRequestForm = Depends(), session: AsyncSession = Depends(get_session)):
    user = await _user_by_email(session, form.username)
    if not user or not pwd_ctx.verify(form.password, user.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    if user.disabled:
        raise HTTPException(status_code=400, detail="Inactive user")
    return _token_pair(user)

@router.post("/login/refresh-token", response_model=Token)
async def refresh_token(payload: Token, session: AsyncSession = Depends(get_session)):
    try:
        decoded = jwt.decode(payload.refresh_token, config.REFRESH_SECRET, algorithms=[config.ALGORITHM])
        sub = decoded.get("sub")
        if not sub:
            raise HTTPException(status_code=401, detail="Invalid refresh token")
        user_id = uuid.UUID(sub)
    except (JWTError, ValueError):
        raise HTTPException(status_code=401, detail="Invalid refresh token")
    user = await session.get(User, user_id)
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return _token_pair(user)
