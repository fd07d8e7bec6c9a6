from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel

if TYPE_CHECKING:
    from .validation import ValidationIssue

__all__ = ["ErrorResponse", "ParamError", "DuplicateParamError", "InvalidParamError", "InvalidHeaderError"]


class ErrorResponse(BaseModel):
    message: str
    code: Optional[str] = None


class ParamError(Exception):
    code = "client::param_error"

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(message=str(self), code=self.code)


class DuplicateParamError(ParamError):
    code = "client::duplicate_param"

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Duplicate request parameter: {key}")


class InvalidParamError(ParamError):
    code = "client::invalid_param"

    def __init__(self, issues: list["ValidationIssue"]):
        self.issues = issues
        details = "; ".join(f"{issue.key}: {issue.message}" for issue in issues)
        super().__init__(f"Invalid request parameters: {details}")


class InvalidHeaderError(ParamError):
    code = "client::invalid_header"

    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value
        super().__init__(f"Header parameter {key} must be ASCII, got {value!r}")
