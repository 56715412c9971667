import logging
from typing import List

from sqlmodel import Session, select

from ..models import Assignment, AssignmentStatusEnum
from ..schemas import AssignmentCreate
from ..utils.course_access import ensure_teacher_course_permission, require_course


logger = logging.getLogger(__name__)


def create_assignment(session: Session, payload: AssignmentCreate) -> Assignment:
    course = require_course(session, payload.course_id)
    if payload.created_by is not None:
        ensure_teacher_course_permission(session, payload.created_by, course)

    assignment = Assignment(
        course_id=course.id,
        title=payload.title,
        description=payload.description,
        due_date=payload.due_date,
        max_score=payload.max_score,
        status=payload.status or AssignmentStatusEnum.draft,
    )
    session.add(assignment)
    session.commit()
    session.refresh(assignment)
    logger.info("Created assignment %s in course %s", assignment.id, course.id)
    return assignment


def get_course_assignments(session: Session, course_id: int) -> List[Assignment]:
    # undated assignments last
    stmt = (
        select(Assignment)
        .where(Assignment.course_id == course_id)
        .order_by(Assignment.due_date.is_(None), Assignment.due_date, Assignment.id)
    )
    return session.exec(stmt).all()
