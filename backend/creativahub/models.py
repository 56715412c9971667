from datetime import UTC, datetime
from decimal import Decimal
from typing import Optional
from enum import Enum
from sqlalchemy import DateTime, UniqueConstraint
from sqlalchemy.types import TypeDecorator
from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    return datetime.now(UTC)


class UTCDateTime(TypeDecorator):
    """Timezone-aware UTC timestamps on every backend.

    Naive input is taken to be UTC. SQLite keeps no offset, so values are
    stored there as naive UTC and re-tagged with UTC when loaded.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        value = value.astimezone(UTC)
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


class Timestamped(SQLModel):
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False)


class UserRoleEnum(str, Enum):
    student = "student"
    teacher = "teacher"
    admin = "admin"

    @classmethod
    def parse(cls, value) -> Optional["UserRoleEnum"]:
        """Return the matching role, or ``None`` for unknown values."""
        try:
            return cls(value)
        except ValueError:
            return None


class CourseStatusEnum(str, Enum):
    draft = "draft"
    published = "published"
    archived = "archived"


class AssignmentStatusEnum(str, Enum):
    draft = "draft"
    published = "published"
    closed = "closed"


class SubmissionStatusEnum(str, Enum):
    draft = "draft"
    submitted = "submitted"
    graded = "graded"


class User(Timestamped, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(index=True, unique=True)
    hashed_password: str
    full_name: str
    role: UserRoleEnum = Field(index=True)
    avatar_url: Optional[str] = Field(default=None, sa_column_kwargs={"nullable": True})
    is_active: bool = Field(default=True)


class Course(Timestamped, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: Optional[str] = None
    teacher_id: int = Field(foreign_key="user.id", index=True)
    thumbnail_url: Optional[str] = Field(default=None, sa_column_kwargs={"nullable": True})
    status: CourseStatusEnum = Field(default=CourseStatusEnum.draft, index=True)


class CourseEnrollment(SQLModel, table=True):
    __table_args__ = (
        UniqueConstraint("course_id", "student_id", name="uq_course_enrollment"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    course_id: int = Field(foreign_key="course.id", index=True)
    student_id: int = Field(foreign_key="user.id", index=True)
    enrolled_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False)


class LearningMaterial(Timestamped, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    course_id: int = Field(foreign_key="course.id", index=True)
    title: str
    description: Optional[str] = None
    content_url: Optional[str] = Field(default=None, sa_column_kwargs={"nullable": True})
    file_url: Optional[str] = Field(default=None, sa_column_kwargs={"nullable": True})
    material_type: str
    order_index: int = Field(default=0)


class Assignment(Timestamped, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    course_id: int = Field(foreign_key="course.id", index=True)
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = Field(default=None, sa_type=UTCDateTime, nullable=True)
    max_score: Decimal = Field(max_digits=5, decimal_places=2)
    status: AssignmentStatusEnum = Field(default=AssignmentStatusEnum.draft, index=True)


class AssignmentSubmission(Timestamped, table=True):
    __table_args__ = (
        UniqueConstraint("assignment_id", "student_id", name="uq_assignment_submission"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    assignment_id: int = Field(foreign_key="assignment.id", index=True)
    student_id: int = Field(foreign_key="user.id", index=True)
    submission_url: Optional[str] = Field(default=None, sa_column_kwargs={"nullable": True})
    submission_text: Optional[str] = Field(default=None, sa_column_kwargs={"nullable": True})
    score: Optional[Decimal] = Field(default=None, max_digits=5, decimal_places=2, nullable=True)
    feedback: Optional[str] = Field(default=None, sa_column_kwargs={"nullable": True})
    status: SubmissionStatusEnum = Field(default=SubmissionStatusEnum.draft, index=True)
    submitted_at: Optional[datetime] = Field(default=None, sa_type=UTCDateTime, nullable=True)
    graded_at: Optional[datetime] = Field(default=None, sa_type=UTCDateTime, nullable=True)


class PortfolioProject(Timestamped, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    student_id: int = Field(foreign_key="user.id", index=True)
    title: str
    description: Optional[str] = None
    project_url: Optional[str] = Field(default=None, sa_column_kwargs={"nullable": True})
    thumbnail_url: Optional[str] = Field(default=None, sa_column_kwargs={"nullable": True})
    tags: Optional[str] = Field(default=None, description="Comma-joined tag list")
    is_public: bool = Field(default=False)
