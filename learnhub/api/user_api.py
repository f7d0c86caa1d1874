from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from learnhub.auth.permissions import require_admin
from learnhub.configs.database import get_db
from learnhub.schemas.user_schema import UserResponse
from learnhub.services import user_service

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(require_admin)])


@router.get("", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    return [UserResponse.from_user(user) for user in user_service.list_users(db)]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db)):
    return UserResponse.from_user(user_service.get_user(user_id, db))
