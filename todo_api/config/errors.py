from fastapi import status


class AppError(Exception):
    """Base error mapped to a JSON response by the app's exception handlers"""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required."


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found."


class Conflict(AppError):
    # Uniqueness violations are reported as 400, not 409
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists."


class InternalError(AppError):
    pass
