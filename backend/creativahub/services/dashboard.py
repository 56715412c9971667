"""Role-scoped dashboard counters.

Every counter is an independent ``COUNT`` query recomputed on each call.
Admins see platform totals, teachers see their own courses, students their own
activity. An unrecognised role yields an empty result rather than an error.
"""

import logging

from sqlalchemy import func
from sqlmodel import Session, select

from ..models import (
    Assignment,
    AssignmentStatusEnum,
    AssignmentSubmission,
    Course,
    CourseEnrollment,
    PortfolioProject,
    SubmissionStatusEnum,
    User,
    UserRoleEnum,
)
from ..schemas import DashboardData


logger = logging.getLogger(__name__)


def _count(session: Session, stmt) -> int:
    return session.exec(stmt).one() or 0


def _admin_dashboard(session: Session) -> DashboardData:
    return DashboardData(
        totalUsers=_count(session, select(func.count(User.id))),
        totalCourses=_count(session, select(func.count(Course.id))),
        totalStudents=_count(
            session, select(func.count(User.id)).where(User.role == UserRoleEnum.student)
        ),
        totalTeachers=_count(
            session, select(func.count(User.id)).where(User.role == UserRoleEnum.teacher)
        ),
    )


def _teacher_dashboard(session: Session, user_id: int) -> DashboardData:
    teaching_courses = select(func.count(Course.id)).where(Course.teacher_id == user_id)
    total_assignments = (
        select(func.count(Assignment.id))
        .join(Course, Assignment.course_id == Course.id)
        .where(Course.teacher_id == user_id)
    )
    pending_submissions = (
        select(func.count(AssignmentSubmission.id))
        .join(Assignment, AssignmentSubmission.assignment_id == Assignment.id)
        .join(Course, Assignment.course_id == Course.id)
        .where(
            Course.teacher_id == user_id,
            AssignmentSubmission.status == SubmissionStatusEnum.submitted,
        )
    )
    return DashboardData(
        teachingCourses=_count(session, teaching_courses),
        totalAssignments=_count(session, total_assignments),
        pendingSubmissions=_count(session, pending_submissions),
    )


def _student_dashboard(session: Session, user_id: int) -> DashboardData:
    enrolled_courses = select(func.count(CourseEnrollment.id)).where(
        CourseEnrollment.student_id == user_id
    )
    active_assignments = (
        select(func.count(Assignment.id))
        .join(CourseEnrollment, CourseEnrollment.course_id == Assignment.course_id)
        .where(
            CourseEnrollment.student_id == user_id,
            Assignment.status == AssignmentStatusEnum.published,
        )
    )
    completed_assignments = select(func.count(AssignmentSubmission.id)).where(
        AssignmentSubmission.student_id == user_id,
        AssignmentSubmission.status == SubmissionStatusEnum.graded,
    )
    portfolio_projects = select(func.count(PortfolioProject.id)).where(
        PortfolioProject.student_id == user_id
    )
    return DashboardData(
        enrolledCourses=_count(session, enrolled_courses),
        activeAssignments=_count(session, active_assignments),
        completedAssignments=_count(session, completed_assignments),
        portfolioProjects=_count(session, portfolio_projects),
    )


def get_dashboard_data(session: Session, user_id: int, role: str) -> DashboardData:
    parsed = UserRoleEnum.parse(role)
    if parsed == UserRoleEnum.admin:
        return _admin_dashboard(session)
    if parsed == UserRoleEnum.teacher:
        return _teacher_dashboard(session, user_id)
    if parsed == UserRoleEnum.student:
        return _student_dashboard(session, user_id)
    logger.warning("Dashboard requested for unknown role %r", role)
    return DashboardData()
