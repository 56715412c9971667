from fastapi import APIRouter, Depends, status
from typing import List

from ..db import get_session
from ..models import PortfolioProject
from ..schemas import PortfolioProjectCreate
from ..services import portfolio as portfolio_service


router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.post("/", response_model=PortfolioProject, status_code=status.HTTP_201_CREATED)
def create_project(payload: PortfolioProjectCreate, session=Depends(get_session)):
    return portfolio_service.create_portfolio_project(session, payload)


@router.get("/public", response_model=List[PortfolioProject])
def list_public_projects(session=Depends(get_session)):
    return portfolio_service.get_public_portfolio_projects(session)


@router.get("/students/{student_id}", response_model=List[PortfolioProject])
def list_student_projects(student_id: int, session=Depends(get_session)):
    return portfolio_service.get_student_portfolio(session, student_id)
