"""Domain errors raised by the command and query handlers.

Every error carries the HTTP status the API layer answers with, so routers
never translate them by hand. Handlers raise the most specific subclass and
callers that only care about the category catch the base class, e.g.
``except NotFoundError``.
"""

from typing import Optional


class CreativaHubError(Exception):
    status_code = 400
    message = "Operation not allowed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message

    @property
    def code(self) -> str:
        return type(self).__name__


# Categories


class NotFoundError(CreativaHubError):
    status_code = 404
    message = "Resource not found"


class InvalidRoleError(CreativaHubError):
    status_code = 403
    message = "User does not have the required role"


class InactiveAccountError(CreativaHubError):
    status_code = 403
    message = "Account is inactive"


class InvalidStateError(CreativaHubError):
    status_code = 409
    message = "Resource is not in a valid state for this operation"


class NotEnrolledError(CreativaHubError):
    status_code = 403
    message = "Student is not enrolled in the course"


class DuplicateError(CreativaHubError):
    status_code = 409
    message = "Record already exists"


# Named conditions


class NotFound(NotFoundError):
    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class TeacherNotFound(NotFoundError):
    message = "Teacher not found"


class StudentNotFound(NotFoundError):
    message = "Student not found"


class CourseNotFound(NotFoundError):
    message = "Course not found"


class AssignmentNotFound(NotFoundError):
    message = "Assignment not found"


class SubmissionNotFound(NotFoundError):
    message = "Submission not found"


class InvalidTeacherRole(InvalidRoleError):
    message = "User must be a teacher or admin to own a course"


class InvalidStudentRole(InvalidRoleError):
    message = "User is not a student"


class NotCourseTeacher(InvalidRoleError):
    message = "Only the course teacher or an admin can manage this course"


class TeacherInactive(InactiveAccountError):
    message = "Teacher account is inactive"


class StudentInactive(InactiveAccountError):
    message = "Student account is inactive"


class CourseNotEnrollable(InvalidStateError):
    message = "Course is not available for enrollment"


class AssignmentNotPublished(InvalidStateError):
    message = "Assignment is not published"


class SubmissionNotDraft(InvalidStateError):
    message = "Only draft submissions can be turned in"


class StudentNotEnrolled(NotEnrolledError):
    message = "Student is not enrolled in this course"


class AlreadyEnrolled(DuplicateError):
    message = "Student is already enrolled in this course"


class SubmissionAlreadyExists(DuplicateError):
    message = "Submission already exists for this assignment"


class DuplicateEmail(DuplicateError):
    message = "Email is already registered"
