from .types import Param, AnyParam, ScalarParam, ParamPlacement, StructuredParam, DetachedResponseProfile
from .errors import ParamError, ErrorResponse, InvalidParamError, InvalidHeaderError, DuplicateParamError
from .params import ParamFactory
from .request import RequestParams, DuplicateKeyPolicy
from .validation import ParamValidator, ValidationIssue

__all__ = [
    "Param",
    "AnyParam",
    "ScalarParam",
    "ParamPlacement",
    "StructuredParam",
    "DetachedResponseProfile",
    "ParamError",
    "ErrorResponse",
    "InvalidParamError",
    "DuplicateParamError",
    "InvalidHeaderError",
    "ParamFactory",
    "RequestParams",
    "DuplicateKeyPolicy",
    "ParamValidator",
    "ValidationIssue",
]
