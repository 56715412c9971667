from fastapi import APIRouter, Depends, status
from typing import List, Optional

from ..db import get_session
from ..models import Course
from ..schemas import CourseCreate, CourseUpdate, UserCoursesQuery
from ..services import courses as course_service


router = APIRouter(prefix="/courses", tags=["courses"])


@router.post("/", response_model=Course, status_code=status.HTTP_201_CREATED)
def create_course(payload: CourseCreate, session=Depends(get_session)):
    return course_service.create_course(session, payload)


@router.get("/", response_model=List[Course])
def list_published_courses(session=Depends(get_session)):
    return course_service.get_courses(session)


@router.get("/for-user", response_model=List[Course])
def list_user_courses(user_id: int, role: str, session=Depends(get_session)):
    return course_service.get_user_courses(session, UserCoursesQuery(user_id=user_id, role=role))


@router.get("/{course_id}", response_model=Optional[Course])
def get_course(course_id: int, session=Depends(get_session)):
    return course_service.get_course_details(session, course_id)


@router.patch("/{course_id}", response_model=Course)
def update_course(course_id: int, payload: CourseUpdate, session=Depends(get_session)):
    return course_service.update_course(session, course_id, payload)
