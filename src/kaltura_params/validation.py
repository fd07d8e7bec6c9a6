import re
import logging
from typing import Callable, Iterable, Optional

from pydantic import BaseModel

from .types import Param
from .errors import InvalidParamError
from .params import KS_KEY, USER_ID_KEY, CURRENCY_KEY, LANGUAGE_KEY, REQUEST_ID_KEY, RESPONSE_PROFILE_KEY

logger = logging.getLogger(__name__)

__all__ = ["ValidationIssue", "ParamValidator"]

LANGUAGE_PATTERN = re.compile(r"^[A-Za-z]{2,3}([-_][A-Za-z0-9]{2,8})?$")
CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")


class ValidationIssue(BaseModel):
    key: str
    message: str


def _non_empty(param: Param) -> Optional[str]:
    if not isinstance(param.value, str) or not param.value.strip():
        return "must be a non-empty string"
    return None


def _language(param: Param) -> Optional[str]:
    if not isinstance(param.value, str) or not LANGUAGE_PATTERN.match(param.value):
        return f"'{param.value}' is not a language code"
    return None


def _currency(param: Param) -> Optional[str]:
    if not isinstance(param.value, str) or not CURRENCY_PATTERN.match(param.value):
        return f"'{param.value}' is not a three letter currency code"
    return None


def _response_profile(param: Param) -> Optional[str]:
    if param.value is None:
        return "must not be None"
    return None


Rule = Callable[[Param], Optional[str]]

DEFAULT_RULES: dict[str, Rule] = {
    KS_KEY: _non_empty,
    LANGUAGE_KEY: _language,
    REQUEST_ID_KEY: _non_empty,
    CURRENCY_KEY: _currency,
    USER_ID_KEY: _non_empty,
    RESPONSE_PROFILE_KEY: _response_profile,
}


class ParamValidator:
    """Checks param values before a request is assembled. Unknown keys pass."""

    def __init__(self, rules: Optional[dict[str, Rule]] = None):
        self.rules: dict[str, Rule] = {**DEFAULT_RULES, **(rules or {})}

    def validate(self, param: Param) -> list[ValidationIssue]:
        rule = self.rules.get(param.key)
        if rule is None:
            return []
        message = rule(param)
        if message is None:
            return []
        return [ValidationIssue(key=param.key, message=message)]

    def validate_all(self, params: Iterable[Param]) -> list[ValidationIssue]:
        issues = []
        for param in params:
            issues.extend(self.validate(param))
        return issues

    def ensure_valid(self, params: Iterable[Param]) -> None:
        issues = self.validate_all(params)
        if issues:
            logger.warning(f"Rejected {len(issues)} invalid request parameter(s)")
            raise InvalidParamError(issues)
