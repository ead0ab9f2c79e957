from typing import Dict, NoReturn

from fastapi import status

from auth_service.libs.result import Error

# Use case error codes that are the caller's fault; anything else is a 500
ERROR_STATUS_CODES: Dict[str, int] = {
    # 400 Bad Request
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "INVALID_OR_EXPIRED_TOKEN": status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "INCORRECT_OLD_PASSWORD": status.HTTP_401_UNAUTHORIZED,
    "MISSING_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "TOKEN_EXPIRED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CALLBACK_SECRET": status.HTTP_401_UNAUTHORIZED,
    # 404 Not Found
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    # 409 Conflict
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "USERNAME_TAKEN": status.HTTP_409_CONFLICT,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)

    @classmethod
    def unauthorized(cls, code: str, message: str) -> "ClientError":
        return cls(Error(code, message), status_code=status.HTTP_401_UNAUTHORIZED)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error) -> NoReturn:
    """Raise the HTTP-level exception matching a use case error"""
    status_code = ERROR_STATUS_CODES.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
