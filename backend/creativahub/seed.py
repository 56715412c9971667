from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from sqlmodel import Session, select

from .config import settings
from .db import engine
from .models import (
    Assignment,
    AssignmentStatusEnum,
    Course,
    CourseEnrollment,
    CourseStatusEnum,
    LearningMaterial,
    PortfolioProject,
    User,
    UserRoleEnum,
    utcnow,
)
from .security import get_password_hash, verify_password


logger = logging.getLogger(__name__)

DEFAULT_ADMIN_NAME = "CreativaHub Admin"

DEMO_TEACHER_EMAIL = "docente@creativahub.dev"
DEMO_STUDENT_EMAIL = "estudiante@creativahub.dev"
DEMO_PASSWORD = "creativa123"
DEMO_COURSE_TITLE = "Fotografía digital: primeros pasos"


def ensure_default_admin(session: Optional[Session] = None) -> User:
    """Create the default admin account if none exists, repairing it otherwise."""
    owns_session = session is None
    session = session or Session(engine)
    try:
        existing = session.exec(select(User).where(User.email == settings.default_admin_email)).first()
        if existing:
            updated = False
            if not verify_password(settings.default_admin_password, existing.hashed_password):
                existing.hashed_password = get_password_hash(settings.default_admin_password)
                updated = True
            if existing.role != UserRoleEnum.admin:
                existing.role = UserRoleEnum.admin
                updated = True
            if not existing.is_active:
                existing.is_active = True
                updated = True
            if updated:
                existing.updated_at = utcnow()
                session.add(existing)
                session.commit()
                session.refresh(existing)
            return existing
        user = User(
            email=settings.default_admin_email,
            full_name=DEFAULT_ADMIN_NAME,
            hashed_password=get_password_hash(settings.default_admin_password),
            role=UserRoleEnum.admin,
            is_active=True,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        logger.info("Created default admin %s", user.email)
        return user
    finally:
        if owns_session:
            session.close()


def ensure_demo_data(session: Optional[Session] = None) -> None:
    """Populate a teacher, a student and one published course for local use."""
    if session is None:
        with Session(engine) as owned:
            _populate_demo_data(owned)
        return
    _populate_demo_data(session)


def _populate_demo_data(session: Session) -> None:
    ensure_default_admin(session)
    teacher = _get_or_create_user(
        session,
        email=DEMO_TEACHER_EMAIL,
        full_name="Valeria Ríos",
        role=UserRoleEnum.teacher,
        password=DEMO_PASSWORD,
    )
    student = _get_or_create_user(
        session,
        email=DEMO_STUDENT_EMAIL,
        full_name="Tomás Herrera",
        role=UserRoleEnum.student,
        password=DEMO_PASSWORD,
    )
    course = _ensure_course(session, teacher)
    _ensure_course_content(session, course)
    _ensure_enrollment(session, course, student)
    _ensure_portfolio(session, student)
    logger.info("Demo data ready (course %s)", course.id)


def _get_or_create_user(
    session: Session,
    *,
    email: str,
    full_name: str,
    role: UserRoleEnum,
    password: str,
) -> User:
    user = session.exec(select(User).where(User.email == email)).first()
    if user:
        return user

    user = User(
        email=email,
        full_name=full_name,
        hashed_password=get_password_hash(password),
        role=role,
        is_active=True,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def _ensure_course(session: Session, teacher: User) -> Course:
    course = session.exec(select(Course).where(Course.title == DEMO_COURSE_TITLE)).first()
    if course:
        return course
    course = Course(
        title=DEMO_COURSE_TITLE,
        description="Composición, luz y edición básica para el club de medios.",
        teacher_id=teacher.id,
        status=CourseStatusEnum.published,
    )
    session.add(course)
    session.commit()
    session.refresh(course)
    return course


def _ensure_course_content(session: Session, course: Course) -> None:
    has_material = session.exec(
        select(LearningMaterial).where(LearningMaterial.course_id == course.id)
    ).first()
    if not has_material:
        session.add_all(
            [
                LearningMaterial(
                    course_id=course.id,
                    title="La regla de los tercios",
                    material_type="video",
                    content_url="https://media.creativahub.dev/tercios.mp4",
                    order_index=1,
                ),
                LearningMaterial(
                    course_id=course.id,
                    title="Guía de exposición",
                    material_type="document",
                    file_url="https://media.creativahub.dev/exposicion.pdf",
                    order_index=2,
                ),
            ]
        )

    has_assignment = session.exec(select(Assignment).where(Assignment.course_id == course.id)).first()
    if not has_assignment:
        session.add(
            Assignment(
                course_id=course.id,
                title="Serie de tres retratos",
                description="Aplica la regla de los tercios en tres retratos con luz natural.",
                max_score=Decimal("100.00"),
                status=AssignmentStatusEnum.published,
            )
        )
    session.commit()


def _ensure_enrollment(session: Session, course: Course, student: User) -> None:
    enrollment = session.exec(
        select(CourseEnrollment).where(
            CourseEnrollment.course_id == course.id,
            CourseEnrollment.student_id == student.id,
        )
    ).first()
    if enrollment:
        return
    session.add(CourseEnrollment(course_id=course.id, student_id=student.id))
    session.commit()


def _ensure_portfolio(session: Session, student: User) -> None:
    project = session.exec(
        select(PortfolioProject).where(PortfolioProject.student_id == student.id)
    ).first()
    if project:
        return
    session.add(
        PortfolioProject(
            student_id=student.id,
            title="Ciudad de noche",
            description="Serie de fotografía urbana nocturna.",
            tags="fotografía,urbano,nocturna",
            is_public=True,
        )
    )
    session.commit()
