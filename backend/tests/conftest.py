import os
from decimal import Decimal
from uuid import uuid4

import pytest

# Configure the app before any creativahub module reads its settings
TEST_DB_PATH = os.path.abspath("test_creativahub.db")
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["APP_ENV"] = "dev"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, create_engine  # noqa: E402

from creativahub.db import init_db  # noqa: E402
from creativahub.models import (  # noqa: E402
    Assignment,
    AssignmentStatusEnum,
    Course,
    CourseEnrollment,
    CourseStatusEnum,
    UserRoleEnum,
)
from creativahub.schemas import UserCreate  # noqa: E402
from creativahub.services.users import create_user  # noqa: E402


@pytest.fixture(scope="session")
def client():
    try:
        os.remove(TEST_DB_PATH)
    except FileNotFoundError:
        pass

    import creativahub.db as db
    import creativahub.main as main

    assert TEST_DB_PATH in str(db.engine.url), f"Engine points at {db.engine.url}"
    db.init_db()

    client = TestClient(main.app)
    yield client
    client.close()
    db.engine.dispose()
    try:
        os.remove(TEST_DB_PATH)
    except FileNotFoundError:
        pass


@pytest.fixture()
def engine():
    # One private in-memory database per test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def make_user(session):
    def _make_user(role="student", is_active=True, email=None, password="secret123", full_name=None):
        user = create_user(
            session,
            UserCreate(
                email=email or f"{role}-{uuid4().hex[:8]}@creativahub.io",
                password=password,
                full_name=full_name or f"{role.title()} Demo",
                role=UserRoleEnum(role),
            ),
        )
        if not is_active:
            user.is_active = False
            session.add(user)
            session.commit()
            session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def make_course(session, make_user):
    def _make_course(teacher=None, status=CourseStatusEnum.published, title="Ilustración digital"):
        teacher = teacher or make_user(role="teacher")
        course = Course(title=title, teacher_id=teacher.id, status=status)
        session.add(course)
        session.commit()
        session.refresh(course)
        return course

    return _make_course


@pytest.fixture()
def make_assignment(session):
    def _make_assignment(course, status=AssignmentStatusEnum.published, max_score="100.00", title="Storyboard"):
        assignment = Assignment(
            course_id=course.id,
            title=title,
            max_score=Decimal(max_score),
            status=status,
        )
        session.add(assignment)
        session.commit()
        session.refresh(assignment)
        return assignment

    return _make_assignment


@pytest.fixture()
def enroll(session):
    def _enroll(course, student):
        enrollment = CourseEnrollment(course_id=course.id, student_id=student.id)
        session.add(enrollment)
        session.commit()
        session.refresh(enrollment)
        return enrollment

    return _enroll
