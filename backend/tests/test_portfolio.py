import pytest

from creativahub.errors import InvalidStudentRole, StudentInactive, StudentNotFound
from creativahub.schemas import PortfolioProjectCreate
from creativahub.services.portfolio import (
    create_portfolio_project,
    get_public_portfolio_projects,
    get_student_portfolio,
)


def test_create_project_defaults_private(session, make_user):
    student = make_user(role="student")
    project = create_portfolio_project(session, PortfolioProjectCreate(student_id=student.id, title="Mural"))
    assert project.is_public is False
    assert project.tags is None
    assert project.project_url is None


def test_create_project_with_all_fields(session, make_user):
    student = make_user(role="student")
    project = create_portfolio_project(
        session,
        PortfolioProjectCreate(
            student_id=student.id,
            title="Corto animado",
            description="Stop motion de 2 minutos",
            project_url="https://vimeo.test/1",
            thumbnail_url="https://img.test/1.png",
            tags="animación,stop-motion",
            is_public=True,
        ),
    )
    assert project.is_public is True
    assert project.tags == "animación,stop-motion"


def test_creator_must_be_student(session, make_user):
    teacher = make_user(role="teacher")
    with pytest.raises(InvalidStudentRole):
        create_portfolio_project(session, PortfolioProjectCreate(student_id=teacher.id, title="No"))


def test_creator_must_exist(session):
    with pytest.raises(StudentNotFound):
        create_portfolio_project(session, PortfolioProjectCreate(student_id=321, title="No"))


def test_creator_must_be_active(session, make_user):
    student = make_user(role="student", is_active=False)
    with pytest.raises(StudentInactive):
        create_portfolio_project(session, PortfolioProjectCreate(student_id=student.id, title="No"))


def test_student_portfolio_newest_first(session, make_user):
    student = make_user(role="student")
    other = make_user(role="student")
    older = create_portfolio_project(session, PortfolioProjectCreate(student_id=student.id, title="Uno"))
    newer = create_portfolio_project(session, PortfolioProjectCreate(student_id=student.id, title="Dos"))
    create_portfolio_project(session, PortfolioProjectCreate(student_id=other.id, title="Ajeno"))

    assert [p.id for p in get_student_portfolio(session, student.id)] == [newer.id, older.id]
    assert get_student_portfolio(session, 9999) == []


def test_public_projects_only(session, make_user):
    ana = make_user(role="student")
    luis = make_user(role="student")
    public_old = create_portfolio_project(
        session, PortfolioProjectCreate(student_id=ana.id, title="Público 1", is_public=True)
    )
    create_portfolio_project(session, PortfolioProjectCreate(student_id=ana.id, title="Privado"))
    public_new = create_portfolio_project(
        session, PortfolioProjectCreate(student_id=luis.id, title="Público 2", is_public=True)
    )

    assert [p.id for p in get_public_portfolio_projects(session)] == [public_new.id, public_old.id]
