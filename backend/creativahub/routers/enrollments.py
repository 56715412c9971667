from fastapi import APIRouter, Depends, status

from ..db import get_session
from ..models import CourseEnrollment
from ..schemas import EnrollmentCreate
from ..services.courses import enroll_in_course


router = APIRouter(prefix="/enrollments", tags=["enrollments"])


@router.post("/", response_model=CourseEnrollment, status_code=status.HTTP_201_CREATED)
def create_enrollment(payload: EnrollmentCreate, session=Depends(get_session)):
    return enroll_in_course(session, payload)
