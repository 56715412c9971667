import logging
from typing import List, Optional

from sqlmodel import Session, select

from ..errors import AlreadyEnrolled, CourseNotEnrollable, NotFound
from ..models import Course, CourseEnrollment, CourseStatusEnum, UserRoleEnum
from ..schemas import CourseCreate, CourseUpdate, EnrollmentCreate, UserCoursesQuery
from ..utils.course_access import (
    is_enrolled,
    require_active_student,
    require_active_teacher,
    require_course,
)
from ..utils.sqlmodel_helpers import apply_partial_update, commit_or_conflict


logger = logging.getLogger(__name__)


def create_course(session: Session, payload: CourseCreate) -> Course:
    require_active_teacher(session, payload.teacher_id)

    course = Course(
        title=payload.title,
        description=payload.description,
        teacher_id=payload.teacher_id,
        thumbnail_url=payload.thumbnail_url,
        status=payload.status or CourseStatusEnum.draft,
    )
    session.add(course)
    session.commit()
    session.refresh(course)
    logger.info("Created course %s for teacher %s", course.id, course.teacher_id)
    return course


def update_course(session: Session, course_id: int, payload: CourseUpdate) -> Course:
    course = session.get(Course, course_id)
    if not course:
        raise NotFound("Course", course_id)

    data = payload.model_dump(exclude_unset=True)
    apply_partial_update(course, data)
    session.add(course)
    session.commit()
    session.refresh(course)
    logger.info("Updated course %s fields=%s", course.id, sorted(data))
    return course


def get_courses(session: Session) -> List[Course]:
    """Published courses, i.e. the catalogue open for enrollment."""
    stmt = (
        select(Course)
        .where(Course.status == CourseStatusEnum.published)
        .order_by(Course.created_at.desc(), Course.id.desc())
    )
    return session.exec(stmt).all()


def get_user_courses(session: Session, query: UserCoursesQuery) -> List[Course]:
    role = UserRoleEnum.parse(query.role)
    if role is None:
        logger.warning("Course listing requested for unknown role %r", query.role)
        return []

    stmt = select(Course)
    if role == UserRoleEnum.student:
        stmt = stmt.join(CourseEnrollment, CourseEnrollment.course_id == Course.id).where(
            CourseEnrollment.student_id == query.user_id
        )
    elif role == UserRoleEnum.teacher:
        stmt = stmt.where(Course.teacher_id == query.user_id)
    stmt = stmt.order_by(Course.created_at.desc(), Course.id.desc())
    return session.exec(stmt).all()


def get_course_details(session: Session, course_id: int) -> Optional[Course]:
    return session.get(Course, course_id)


def enroll_in_course(session: Session, payload: EnrollmentCreate) -> CourseEnrollment:
    require_active_student(session, payload.student_id)
    course = require_course(session, payload.course_id)
    if course.status != CourseStatusEnum.published:
        raise CourseNotEnrollable()
    if is_enrolled(session, course.id, payload.student_id):
        raise AlreadyEnrolled()

    enrollment = CourseEnrollment(course_id=course.id, student_id=payload.student_id)
    commit_or_conflict(session, enrollment, AlreadyEnrolled)
    logger.info("Enrolled student %s in course %s", enrollment.student_id, enrollment.course_id)
    return enrollment
