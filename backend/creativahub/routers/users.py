from fastapi import APIRouter, Depends, status
from typing import List, Optional

from ..db import get_session
from ..schemas import UserCreate, UserOut, UserUpdate
from ..services import users as user_service


router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, session=Depends(get_session)):
    return user_service.create_user(session, payload)


@router.get("/", response_model=List[UserOut])
def list_users(session=Depends(get_session)):
    return user_service.get_users(session)


@router.get("/{user_id}", response_model=Optional[UserOut])
def get_user(user_id: int, session=Depends(get_session)):
    return user_service.get_user_by_id(session, user_id)


@router.patch("/{user_id}", response_model=UserOut)
def update_user(user_id: int, payload: UserUpdate, session=Depends(get_session)):
    return user_service.update_user(session, user_id, payload)
