"""Precondition checks shared by the command handlers.

Each helper resolves one entity and raises the named error for the first
failing check, in existence -> role -> state order.
"""

from sqlmodel import Session, select

from ..errors import (
    CourseNotFound,
    InvalidStudentRole,
    InvalidTeacherRole,
    NotCourseTeacher,
    NotFound,
    StudentInactive,
    StudentNotFound,
    TeacherInactive,
    TeacherNotFound,
)
from ..models import Course, CourseEnrollment, User, UserRoleEnum


def require_active_teacher(session: Session, user_id: int) -> User:
    teacher = session.get(User, user_id)
    if not teacher:
        raise TeacherNotFound()
    if teacher.role not in (UserRoleEnum.teacher, UserRoleEnum.admin):
        raise InvalidTeacherRole()
    if not teacher.is_active:
        raise TeacherInactive()
    return teacher


def require_active_student(session: Session, user_id: int) -> User:
    student = session.get(User, user_id)
    if not student:
        raise StudentNotFound()
    if student.role != UserRoleEnum.student:
        raise InvalidStudentRole()
    if not student.is_active:
        raise StudentInactive()
    return student


def require_course(session: Session, course_id: int) -> Course:
    course = session.get(Course, course_id)
    if not course:
        raise CourseNotFound()
    return course


def ensure_teacher_course_permission(session: Session, user_id: int, course: Course) -> User:
    """Allow admins and the course's own teacher; reject everyone else."""
    user = session.get(User, user_id)
    if not user:
        raise NotFound("User", user_id)
    if user.role == UserRoleEnum.admin:
        return user
    if user.role != UserRoleEnum.teacher or course.teacher_id != user.id:
        raise NotCourseTeacher()
    return user


def is_enrolled(session: Session, course_id: int, student_id: int) -> bool:
    enrollment = session.exec(
        select(CourseEnrollment).where(
            CourseEnrollment.course_id == course_id,
            CourseEnrollment.student_id == student_id,
        )
    ).first()
    return enrollment is not None
