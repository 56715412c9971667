from decimal import Decimal

from creativahub.models import (
    AssignmentStatusEnum,
    AssignmentSubmission,
    PortfolioProject,
    SubmissionStatusEnum,
)
from creativahub.services.dashboard import get_dashboard_data


def _submission(session, assignment, student, status, score=None):
    submission = AssignmentSubmission(
        assignment_id=assignment.id,
        student_id=student.id,
        status=status,
        score=score,
    )
    session.add(submission)
    session.commit()
    return submission


def _dump(data):
    return data.model_dump(exclude_none=True)


def test_admin_dashboard_on_empty_store(session, make_user):
    admin = make_user(role="admin")
    assert _dump(get_dashboard_data(session, admin.id, "admin")) == {
        "totalUsers": 1,
        "totalCourses": 0,
        "totalStudents": 0,
        "totalTeachers": 0,
    }


def test_admin_dashboard_counts(session, make_user, make_course):
    admin = make_user(role="admin")
    teacher = make_user(role="teacher")
    make_user(role="student")
    make_user(role="student")
    make_course(teacher=teacher)
    make_course(teacher=teacher)

    assert _dump(get_dashboard_data(session, admin.id, "admin")) == {
        "totalUsers": 4,
        "totalCourses": 2,
        "totalStudents": 2,
        "totalTeachers": 1,
    }


def test_teacher_dashboard_only_counts_own_courses(session, make_user, make_course, make_assignment, enroll):
    teacher = make_user(role="teacher")
    other_teacher = make_user(role="teacher")
    student = make_user(role="student")
    mine = make_course(teacher=teacher)
    make_course(teacher=teacher)
    theirs = make_course(teacher=other_teacher)
    enroll(mine, student)
    enroll(theirs, student)

    a1 = make_assignment(mine, title="A1")
    a2 = make_assignment(mine, title="A2", status=AssignmentStatusEnum.draft)
    foreign = make_assignment(theirs)
    _submission(session, a1, student, SubmissionStatusEnum.submitted)
    _submission(session, a2, student, SubmissionStatusEnum.graded, score=Decimal("10"))
    _submission(session, foreign, student, SubmissionStatusEnum.submitted)

    assert _dump(get_dashboard_data(session, teacher.id, "teacher")) == {
        "teachingCourses": 2,
        "totalAssignments": 2,
        "pendingSubmissions": 1,
    }


def test_teacher_without_courses(session, make_user):
    teacher = make_user(role="teacher")
    assert _dump(get_dashboard_data(session, teacher.id, "teacher")) == {
        "teachingCourses": 0,
        "totalAssignments": 0,
        "pendingSubmissions": 0,
    }


def test_student_dashboard_counts(session, make_user, make_course, make_assignment, enroll):
    student = make_user(role="student")
    classmate = make_user(role="student")
    first = make_course()
    second = make_course()
    not_enrolled = make_course()
    enroll(first, student)
    enroll(second, student)
    enroll(first, classmate)

    published = make_assignment(first, title="P1")
    make_assignment(second, title="P2")
    make_assignment(first, title="Borrador", status=AssignmentStatusEnum.draft)
    make_assignment(not_enrolled, title="Ajena")

    _submission(session, published, student, SubmissionStatusEnum.graded, score=Decimal("95.5"))
    _submission(session, published, classmate, SubmissionStatusEnum.graded, score=Decimal("80"))
    for title in ("Uno", "Dos"):
        session.add(PortfolioProject(student_id=student.id, title=title))
    session.add(PortfolioProject(student_id=classmate.id, title="Ajeno"))
    session.commit()

    assert _dump(get_dashboard_data(session, student.id, "student")) == {
        "enrolledCourses": 2,
        "activeAssignments": 2,
        "completedAssignments": 1,
        "portfolioProjects": 2,
    }


def test_student_without_activity(session, make_user):
    student = make_user(role="student")
    assert _dump(get_dashboard_data(session, student.id, "student")) == {
        "enrolledCourses": 0,
        "activeAssignments": 0,
        "completedAssignments": 0,
        "portfolioProjects": 0,
    }


def test_unknown_role_gives_empty_dashboard(session):
    assert _dump(get_dashboard_data(session, 1, "unknown_role")) == {}
