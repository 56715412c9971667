from datetime import UTC, datetime, timedelta

from sqlmodel import SQLModel

from creativahub.models import AssignmentSubmission, Course, User, UTCDateTime, utcnow
from creativahub.schemas import SubmissionGrade
from creativahub.services.submissions import grade_assignment_submission


def test_utcnow_is_timezone_aware():
    now = utcnow()
    assert now.tzinfo is not None
    assert now.utcoffset() == timedelta(0)


def test_every_datetime_column_is_utc_aware():
    datetime_columns = [
        column
        for table in SQLModel.metadata.sorted_tables
        for column in table.columns
        if column.name.endswith("_at") or column.name == "due_date"
    ]
    assert datetime_columns
    for column in datetime_columns:
        assert isinstance(column.type, UTCDateTime), column
        assert column.type.impl.timezone is True


def test_writes_store_and_reload_aware_timestamps(session, make_user, make_course):
    before = utcnow()
    teacher = make_user(role="teacher")
    course = make_course(teacher=teacher)

    session.expire_all()
    stored_user = session.get(User, teacher.id)
    stored_course = session.get(Course, course.id)
    for value in (stored_user.created_at, stored_user.updated_at, stored_course.created_at):
        assert value.tzinfo is not None
        assert before - timedelta(seconds=5) <= value <= utcnow()


def test_mutations_bind_aware_timestamps(session, make_user, make_course, make_assignment, enroll):
    student = make_user(role="student")
    course = make_course()
    assignment = make_assignment(course)
    enroll(course, student)
    submission = AssignmentSubmission(assignment_id=assignment.id, student_id=student.id)
    session.add(submission)
    session.commit()

    graded = grade_assignment_submission(session, submission.id, SubmissionGrade(score="9.50"))
    assert graded.graded_at.tzinfo is not None
    assert graded.updated_at >= graded.created_at


def test_naive_bind_values_are_taken_as_utc():
    column_type = UTCDateTime()

    class _Dialect:
        name = "postgresql"

    bound = column_type.process_bind_param(datetime(2026, 1, 2, 3, 4), _Dialect())
    assert bound == datetime(2026, 1, 2, 3, 4, tzinfo=UTC)
    assert column_type.process_result_value(datetime(2026, 1, 2, 3, 4), _Dialect()).tzinfo is not None
