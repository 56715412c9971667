from fastapi import APIRouter, Depends, status
from typing import List

from ..db import get_session
from ..schemas import (
    AssignmentCreate,
    AssignmentOut,
    SubmissionCreate,
    SubmissionGrade,
    SubmissionOut,
)
from ..services import assignments as assignment_service
from ..services import submissions as submission_service

router = APIRouter(prefix="/assignments", tags=["assignments"])


@router.post("/", response_model=AssignmentOut, status_code=status.HTTP_201_CREATED)
def create_assignment(payload: AssignmentCreate, session=Depends(get_session)):
    return assignment_service.create_assignment(session, payload)


@router.get("/", response_model=List[AssignmentOut])
def list_course_assignments(course_id: int, session=Depends(get_session)):
    return assignment_service.get_course_assignments(session, course_id)


@router.get("/{assignment_id}/submissions", response_model=List[SubmissionOut])
def list_submissions(assignment_id: int, session=Depends(get_session)):
    return submission_service.get_assignment_submissions(session, assignment_id)


@router.post("/submissions", response_model=SubmissionOut, status_code=status.HTTP_201_CREATED)
def create_submission(payload: SubmissionCreate, session=Depends(get_session)):
    return submission_service.create_assignment_submission(session, payload)


@router.get("/submissions/by-student/{student_id}", response_model=List[SubmissionOut])
def list_student_submissions(student_id: int, session=Depends(get_session)):
    return submission_service.get_student_submissions(session, student_id)


@router.post("/submissions/{submission_id}/submit", response_model=SubmissionOut)
def submit_submission(submission_id: int, session=Depends(get_session)):
    return submission_service.submit_assignment_submission(session, submission_id)


@router.post("/submissions/{submission_id}/grade", response_model=SubmissionOut)
def grade_submission(submission_id: int, payload: SubmissionGrade, session=Depends(get_session)):
    return submission_service.grade_assignment_submission(session, submission_id, payload)
