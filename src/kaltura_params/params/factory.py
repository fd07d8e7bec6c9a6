from typing import Any

from ..types import ScalarParam, StructuredParam
from .keys import KS_KEY, USER_ID_KEY, CURRENCY_KEY, LANGUAGE_KEY, REQUEST_ID_KEY, RESPONSE_PROFILE_KEY

__all__ = [
    "ParamFactory",
    "session_token",
    "language",
    "request_correlation_id",
    "currency",
    "user_id",
    "response_profile",
]


class ParamFactory:
    """
    Constructors for the request options understood by the API.

    Every constructor is pure: no validation, no logging, no I/O. Values are
    stored exactly as given and checked, if at all, by the layers consuming
    the params.
    """

    @staticmethod
    def session_token(value: str) -> ScalarParam:
        """Session token (ks), sent in the body"""
        return ScalarParam(key=KS_KEY, value=value, in_body=True)

    @staticmethod
    def language(value: str) -> ScalarParam:
        return ScalarParam(key=LANGUAGE_KEY, value=value, in_body=True)

    @staticmethod
    def request_correlation_id(value: str) -> ScalarParam:
        """Correlation id, sent as the x-kaltura-session-id header"""
        return ScalarParam(key=REQUEST_ID_KEY, value=value, in_body=False)

    @staticmethod
    def currency(value: str) -> ScalarParam:
        return ScalarParam(key=CURRENCY_KEY, value=value, in_body=True)

    @staticmethod
    def user_id(value: str) -> ScalarParam:
        return ScalarParam(key=USER_ID_KEY, value=value, in_body=True)

    @staticmethod
    def response_profile(value: Any) -> StructuredParam:
        """
        Response profile, sent in the body.

        Args:
            value: Any structured value, e.g. a DetachedResponseProfile or a plain dict.
        """
        return StructuredParam(key=RESPONSE_PROFILE_KEY, value=value, in_body=True)


session_token = ParamFactory.session_token
language = ParamFactory.language
request_correlation_id = ParamFactory.request_correlation_id
currency = ParamFactory.currency
user_id = ParamFactory.user_id
response_profile = ParamFactory.response_profile
