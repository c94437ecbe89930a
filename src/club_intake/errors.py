"""Error taxonomy shared by services and routers"""

from typing import Dict, Optional


class IntakeError(Exception):
    """Base class for errors that map onto an HTTP error response"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingSection(IntakeError):
    status_code = 400

    def __init__(self, missing: list[str]):
        super().__init__(
            "Missing required form sections (personalInfo, journey, teamBonding)"
        )
        self.missing = missing


class MissingIdentifier(IntakeError):
    status_code = 400

    def __init__(self, message: str = "Submission ID is required"):
        super().__init__(message)


class ValidationFailed(IntakeError):
    """Field-level validation failure with a {field path: message} mapping"""

    status_code = 400

    def __init__(
        self,
        validation_errors: Dict[str, str],
        message: str = "Validation failed",
    ):
        super().__init__(message)
        self.validation_errors = validation_errors


class DuplicateIdentifier(IntakeError):
    status_code = 409

    def __init__(
        self, message: str = "This registration number has already been submitted"
    ):
        super().__init__(message)


class NotFound(IntakeError):
    status_code = 404


class Unauthorized(IntakeError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized access"):
        super().__init__(message)


class StoreUnavailable(IntakeError):
    """Unexpected failure while talking to the store or a downstream service"""

    status_code = 500

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause
