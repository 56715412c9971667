"""Request and response schemas shared by the services and the routers.

Request schemas are plain (non-table) SQLModel classes so pydantic validates
them; table models are never built straight from user input. Response schemas
exist only where the table model cannot be returned as-is: users hide their
credential hash and decimal columns are published as JSON numbers.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, EmailStr, model_validator
from sqlmodel import SQLModel, Field

from .models import (
    AssignmentStatusEnum,
    CourseStatusEnum,
    SubmissionStatusEnum,
    UserRoleEnum,
)


def _reject_explicit_nulls(payload: SQLModel, *fields: str) -> None:
    for name in fields:
        if name in payload.model_fields_set and getattr(payload, name) is None:
            raise ValueError(f"{name} cannot be null")


# Users


class UserCreate(SQLModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)
    full_name: str = Field(min_length=1, max_length=120)
    role: UserRoleEnum
    avatar_url: Optional[str] = None


class UserUpdate(SQLModel):
    email: Optional[EmailStr] = None
    full_name: Optional[str] = Field(default=None, min_length=1, max_length=120)
    avatar_url: Optional[str] = None
    is_active: Optional[bool] = None

    @model_validator(mode="after")
    def _required_columns_stay_set(self):
        _reject_explicit_nulls(self, "email", "full_name", "is_active")
        return self


class LoginRequest(SQLModel):
    email: str
    password: str


class UserOut(BaseModel):
    id: int
    email: str
    full_name: str
    role: UserRoleEnum
    avatar_url: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# Courses


class CourseCreate(SQLModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    teacher_id: int
    thumbnail_url: Optional[str] = None
    status: Optional[CourseStatusEnum] = None


class CourseUpdate(SQLModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    status: Optional[CourseStatusEnum] = None

    @model_validator(mode="after")
    def _required_columns_stay_set(self):
        _reject_explicit_nulls(self, "title", "status")
        return self


class UserCoursesQuery(SQLModel):
    user_id: int
    role: str


class EnrollmentCreate(SQLModel):
    course_id: int
    student_id: int


# Learning materials


class LearningMaterialCreate(SQLModel):
    course_id: int
    title: str = Field(min_length=1)
    description: Optional[str] = None
    content_url: Optional[str] = None
    file_url: Optional[str] = None
    material_type: str
    order_index: int
    created_by: Optional[int] = Field(default=None, description="Acting user, checked against the course teacher")


# Assignments and submissions


class AssignmentCreate(SQLModel):
    course_id: int
    title: str = Field(min_length=1)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    max_score: Decimal = Field(gt=0, max_digits=5, decimal_places=2)
    status: Optional[AssignmentStatusEnum] = None
    created_by: Optional[int] = Field(default=None, description="Acting user, checked against the course teacher")


class AssignmentOut(BaseModel):
    id: int
    course_id: int
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    max_score: float
    status: AssignmentStatusEnum
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SubmissionCreate(SQLModel):
    assignment_id: int
    student_id: int
    submission_url: Optional[str] = None
    submission_text: Optional[str] = None


class SubmissionGrade(SQLModel):
    score: Decimal = Field(ge=0, max_digits=5, decimal_places=2)
    feedback: Optional[str] = None


class SubmissionOut(BaseModel):
    id: int
    assignment_id: int
    student_id: int
    submission_url: Optional[str] = None
    submission_text: Optional[str] = None
    score: Optional[float] = None
    feedback: Optional[str] = None
    status: SubmissionStatusEnum
    submitted_at: Optional[datetime] = None
    graded_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# Portfolio


class PortfolioProjectCreate(SQLModel):
    student_id: int
    title: str = Field(min_length=1)
    description: Optional[str] = None
    project_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    tags: Optional[str] = None
    is_public: bool = False


# Dashboard


class DashboardData(BaseModel):
    # admin
    totalUsers: Optional[int] = None
    totalCourses: Optional[int] = None
    totalStudents: Optional[int] = None
    totalTeachers: Optional[int] = None
    # teacher
    teachingCourses: Optional[int] = None
    totalAssignments: Optional[int] = None
    pendingSubmissions: Optional[int] = None
    # student
    enrolledCourses: Optional[int] = None
    activeAssignments: Optional[int] = None
    completedAssignments: Optional[int] = None
    portfolioProjects: Optional[int] = None
