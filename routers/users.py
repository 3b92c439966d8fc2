from fastapi import APIRouter, Depends
from models import User
from schemas import UserRead
from deps import get_current_active_user

router = APIRouter(prefix="/users", tags=["users"])

@router.get("/me", response_model=UserRead)
async def read_me(current_user: User = Depends(get_current_active_user)):
    # DO NOT await here; model_validate is sync
    return UserRead.model_validate(current_user)
