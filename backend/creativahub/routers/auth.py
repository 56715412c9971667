from typing import Optional

from fastapi import APIRouter, Depends

from ..db import get_session
from ..schemas import LoginRequest, UserOut
from ..services.users import authenticate_user


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=Optional[UserOut])
def login(payload: LoginRequest, session=Depends(get_session)):
    return authenticate_user(session, payload.email, payload.password)
