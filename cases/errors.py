from rest_framework import status
from rest_framework.exceptions import APIException


class APIError(APIException):
    """Application error carrying a message and an HTTP status code."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"
    default_code = "error"

    def __init__(self, message=None, status_code=None, code=None):
        if status_code is not None:
            self.status_code = status_code
        super().__init__(detail=message, code=code)

    @property
    def message(self):
        return str(self.detail)
