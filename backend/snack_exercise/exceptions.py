"""Domain exceptions.

Each one names a violated precondition and carries the HTTP status and
error code the API answers with. Services raise them; the handler in
``snack_exercise.error_handlers`` turns them into JSON responses.
"""
from fastapi import status


class SnackExerciseError(Exception):
    """Base class for all domain errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "BAD_REQUEST"
    message: str = "Bad request"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class MemberNotFoundException(SnackExerciseError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "MEMBER_NOT_FOUND"
    message = "Member not found"


class ExgroupNotFoundException(SnackExerciseError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "EXGROUP_NOT_FOUND"
    message = "Exgroup not found"


class JoinListNotFoundException(SnackExerciseError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "JOIN_LIST_NOT_FOUND"
    message = "Membership not found"


class ExerciseNotFoundException(SnackExerciseError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "EXERCISE_NOT_FOUND"
    message = "Exercise not found"


class NotExgroupHostException(SnackExerciseError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "NOT_EXGROUP_HOST"
    message = "Only the host of this exgroup may do this"


class NotExgroupMemberException(SnackExerciseError):
    status_code = status.HTTP_409_CONFLICT
    code = "NOT_EXGROUP_MEMBER"
    message = "Target is not an active member of this exgroup"


class MaxMemberNumLessThanCurrentException(SnackExerciseError):
    status_code = status.HTTP_409_CONFLICT
    code = "MAX_MEMBER_NUM_LESS_THAN_CURRENT"
    message = "max_member_num cannot be lower than the current member count"


class AlreadyJoinedExgroupException(SnackExerciseError):
    status_code = status.HTTP_409_CONFLICT
    code = "ALREADY_JOINED_EXGROUP"
    message = "Member already belongs to this exgroup"


class ExgroupFullException(SnackExerciseError):
    status_code = status.HTTP_409_CONFLICT
    code = "EXGROUP_FULL"
    message = "Exgroup has reached its max_member_num"


class ExgroupAlreadyStartedException(SnackExerciseError):
    status_code = status.HTTP_409_CONFLICT
    code = "EXGROUP_ALREADY_STARTED"
    message = "Exgroup has already started"


class MemberAlreadyExistsException(SnackExerciseError):
    status_code = status.HTTP_409_CONFLICT
    code = "MEMBER_ALREADY_EXISTS"
    message = "A member with this email already exists"


class ExgroupCodeGenerationException(SnackExerciseError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    code = "EXGROUP_CODE_GENERATION_FAILED"
    message = "Could not generate a unique exgroup code, try again"
