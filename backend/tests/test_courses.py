import time

import pytest
from pydantic import ValidationError

from creativahub.errors import (
    InvalidRoleError,
    InvalidTeacherRole,
    NotFound,
    TeacherInactive,
    TeacherNotFound,
)
from creativahub.models import Course, CourseStatusEnum
from creativahub.schemas import CourseCreate, CourseUpdate, UserCoursesQuery
from creativahub.services.courses import (
    create_course,
    get_course_details,
    get_courses,
    get_user_courses,
    update_course,
)


def test_create_course_defaults_to_draft(session, make_user):
    teacher = make_user(role="teacher")
    course = create_course(session, CourseCreate(title="Animación 2D", teacher_id=teacher.id))
    assert course.id is not None
    assert course.status == CourseStatusEnum.draft
    assert course.description is None
    assert course.thumbnail_url is None
    assert session.get(Course, course.id).teacher_id == teacher.id


def test_admin_can_own_a_course(session, make_user):
    admin = make_user(role="admin")
    course = create_course(
        session,
        CourseCreate(title="Podcast", teacher_id=admin.id, status="published", description="Audio"),
    )
    assert course.status == CourseStatusEnum.published
    assert course.description == "Audio"


def test_create_course_missing_teacher(session):
    with pytest.raises(TeacherNotFound):
        create_course(session, CourseCreate(title="Sin docente", teacher_id=999))


def test_create_course_rejects_student_owner(session, make_user):
    student = make_user(role="student")
    with pytest.raises(InvalidTeacherRole) as excinfo:
        create_course(session, CourseCreate(title="Cine", teacher_id=student.id))
    assert isinstance(excinfo.value, InvalidRoleError)


def test_create_course_rejects_inactive_teacher(session, make_user):
    teacher = make_user(role="teacher", is_active=False)
    with pytest.raises(TeacherInactive):
        create_course(session, CourseCreate(title="Cine", teacher_id=teacher.id))


def test_create_course_checks_role_before_active_status(session, make_user):
    inactive_student = make_user(role="student", is_active=False)
    with pytest.raises(InvalidTeacherRole):
        create_course(session, CourseCreate(title="Cine", teacher_id=inactive_student.id))


def test_update_course_changes_only_given_fields(session, make_user):
    teacher = make_user(role="teacher")
    course = create_course(
        session,
        CourseCreate(title="Diseño", teacher_id=teacher.id, description="Bases", thumbnail_url="t.png"),
    )
    before = course.updated_at
    time.sleep(0.01)

    updated = update_course(session, course.id, CourseUpdate(status="published"))
    assert updated.status == CourseStatusEnum.published
    assert updated.title == "Diseño"
    assert updated.description == "Bases"
    assert updated.thumbnail_url == "t.png"
    assert updated.teacher_id == teacher.id
    assert updated.updated_at > before

    cleared = update_course(session, course.id, CourseUpdate(description=None, title="Diseño II"))
    assert cleared.description is None
    assert cleared.title == "Diseño II"


def test_update_course_missing(session):
    with pytest.raises(NotFound) as excinfo:
        update_course(session, 77, CourseUpdate(title="X"))
    assert excinfo.value.entity == "Course"


def test_course_update_rejects_null_title():
    with pytest.raises(ValidationError):
        CourseUpdate(title=None)


def test_get_courses_returns_published_only(session, make_course):
    published = make_course(status=CourseStatusEnum.published)
    make_course(status=CourseStatusEnum.draft)
    make_course(status=CourseStatusEnum.archived)

    result = get_courses(session)
    assert [c.id for c in result] == [published.id]
    assert get_courses(session) == result


def test_user_courses_scoped_by_role(session, make_user, make_course, enroll):
    teacher = make_user(role="teacher")
    student = make_user(role="student")
    admin = make_user(role="admin")
    taught = make_course(teacher=teacher)
    other = make_course()
    enroll(other, student)

    teacher_courses = get_user_courses(session, UserCoursesQuery(user_id=teacher.id, role="teacher"))
    assert [c.id for c in teacher_courses] == [taught.id]

    student_courses = get_user_courses(session, UserCoursesQuery(user_id=student.id, role="student"))
    assert [c.id for c in student_courses] == [other.id]

    admin_courses = get_user_courses(session, UserCoursesQuery(user_id=admin.id, role="admin"))
    assert {c.id for c in admin_courses} == {taught.id, other.id}


def test_user_courses_unknown_role_is_empty(session, make_course):
    make_course()
    assert get_user_courses(session, UserCoursesQuery(user_id=1, role="janitor")) == []


def test_get_course_details(session, make_course):
    course = make_course(title="Escultura")
    assert get_course_details(session, course.id).title == "Escultura"
    assert get_course_details(session, 12345) is None
