"""Assignment submissions and their status transitions.

A submission is created in ``draft``, turned in (``submitted``) by the student
and scored (``graded``) by the teacher. Grading can be repeated; it overwrites
score and feedback and refreshes ``graded_at``. Nothing moves a submission
back to ``draft``.
"""

import logging
from typing import List

from sqlmodel import Session, select

from ..errors import (
    AssignmentNotFound,
    AssignmentNotPublished,
    StudentNotEnrolled,
    SubmissionAlreadyExists,
    SubmissionNotDraft,
    SubmissionNotFound,
)
from ..models import (
    Assignment,
    AssignmentStatusEnum,
    AssignmentSubmission,
    SubmissionStatusEnum,
    utcnow,
)
from ..schemas import SubmissionCreate, SubmissionGrade
from ..utils.course_access import is_enrolled
from ..utils.sqlmodel_helpers import commit_or_conflict


logger = logging.getLogger(__name__)


def _has_submission(session: Session, assignment_id: int, student_id: int) -> bool:
    existing = session.exec(
        select(AssignmentSubmission).where(
            AssignmentSubmission.assignment_id == assignment_id,
            AssignmentSubmission.student_id == student_id,
        )
    ).first()
    return existing is not None


def create_assignment_submission(session: Session, payload: SubmissionCreate) -> AssignmentSubmission:
    assignment = session.get(Assignment, payload.assignment_id)
    if not assignment:
        raise AssignmentNotFound()
    if assignment.status != AssignmentStatusEnum.published:
        raise AssignmentNotPublished()
    if not is_enrolled(session, assignment.course_id, payload.student_id):
        raise StudentNotEnrolled()

    if _has_submission(session, assignment.id, payload.student_id):
        raise SubmissionAlreadyExists()

    submission = AssignmentSubmission(
        assignment_id=assignment.id,
        student_id=payload.student_id,
        submission_url=payload.submission_url,
        submission_text=payload.submission_text,
        status=SubmissionStatusEnum.draft,
    )
    commit_or_conflict(session, submission, SubmissionAlreadyExists)
    logger.info("Created submission %s for assignment %s", submission.id, assignment.id)
    return submission


def submit_assignment_submission(session: Session, submission_id: int) -> AssignmentSubmission:
    submission = session.get(AssignmentSubmission, submission_id)
    if not submission:
        raise SubmissionNotFound()
    if submission.status != SubmissionStatusEnum.draft:
        raise SubmissionNotDraft()

    now = utcnow()
    submission.status = SubmissionStatusEnum.submitted
    submission.submitted_at = now
    submission.updated_at = now
    session.add(submission)
    session.commit()
    session.refresh(submission)
    logger.info("Submission %s turned in", submission.id)
    return submission


def grade_assignment_submission(
    session: Session, submission_id: int, payload: SubmissionGrade
) -> AssignmentSubmission:
    submission = session.get(AssignmentSubmission, submission_id)
    if not submission:
        raise SubmissionNotFound()

    now = utcnow()
    submission.score = payload.score
    submission.feedback = payload.feedback
    submission.status = SubmissionStatusEnum.graded
    submission.graded_at = now
    submission.updated_at = now
    session.add(submission)
    session.commit()
    session.refresh(submission)
    logger.info("Graded submission %s with score %s", submission.id, submission.score)
    return submission


def get_assignment_submissions(session: Session, assignment_id: int) -> List[AssignmentSubmission]:
    stmt = (
        select(AssignmentSubmission)
        .where(AssignmentSubmission.assignment_id == assignment_id)
        .order_by(AssignmentSubmission.id)
    )
    return session.exec(stmt).all()


def get_student_submissions(session: Session, student_id: int) -> List[AssignmentSubmission]:
    stmt = (
        select(AssignmentSubmission)
        .where(AssignmentSubmission.student_id == student_id)
        .order_by(AssignmentSubmission.id)
    )
    return session.exec(stmt).all()
