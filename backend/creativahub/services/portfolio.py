import logging
from typing import List

from sqlmodel import Session, select

from ..models import PortfolioProject
from ..schemas import PortfolioProjectCreate
from ..utils.course_access import require_active_student


logger = logging.getLogger(__name__)


def create_portfolio_project(session: Session, payload: PortfolioProjectCreate) -> PortfolioProject:
    require_active_student(session, payload.student_id)

    project = PortfolioProject(
        student_id=payload.student_id,
        title=payload.title,
        description=payload.description,
        project_url=payload.project_url,
        thumbnail_url=payload.thumbnail_url,
        tags=payload.tags,
        is_public=payload.is_public,
    )
    session.add(project)
    session.commit()
    session.refresh(project)
    logger.info("Created portfolio project %s for student %s", project.id, project.student_id)
    return project


def get_student_portfolio(session: Session, student_id: int) -> List[PortfolioProject]:
    stmt = (
        select(PortfolioProject)
        .where(PortfolioProject.student_id == student_id)
        .order_by(PortfolioProject.created_at.desc(), PortfolioProject.id.desc())
    )
    return session.exec(stmt).all()


def get_public_portfolio_projects(session: Session) -> List[PortfolioProject]:
    stmt = (
        select(PortfolioProject)
        .where(PortfolioProject.is_public == True)  # noqa: E712
        .order_by(PortfolioProject.created_at.desc(), PortfolioProject.id.desc())
    )
    return session.exec(stmt).all()
