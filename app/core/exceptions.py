from typing import Any, Dict, Optional

class AppException(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_code: str = "BUSINESS_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

class AuthenticationError(AppException):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTH_FAILED"
        )

class JobNotFoundError(AppException):
    def __init__(self, job_id: int):
        super().__init__(
            message="Job not found",
            status_code=404,
            error_code="JOB_NOT_FOUND",
            details={"job_id": job_id}
        )

class DatasetError(AppException):
    """The static job collection could not be read or failed validation."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=500,
            error_code="DATASET_ERROR",
            details=details
        )
