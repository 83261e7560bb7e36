from fastapi import status
from placement_api.libs.result import Error


class ApiError(Exception):
    """Use case error on its way to the HTTP response"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    def body(self) -> dict:
        return {"error": {"code": self.base_error.code, "message": self.base_error.message}}


class ClientError(ApiError):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(base_error)
        self.status_code = status_code


class UnauthenticatedError(ClientError):
    """Bearer credential missing or not resolvable to an organization"""

    def __init__(self, message: str):
        super().__init__(
            Error("UNAUTHENTICATED", message), status_code=status.HTTP_401_UNAUTHORIZED
        )


class ServerError(ApiError):
    def body(self) -> dict:
        # Details stay in the log
        return {"error": {"code": self.base_error.code, "message": "Internal server error"}}
