"""
Request parameters.

One constructor per request option, each returning an immutable Param.
"""

from .keys import (
    KS_KEY as KS_KEY,
    USER_ID_KEY as USER_ID_KEY,
    CURRENCY_KEY as CURRENCY_KEY,
    LANGUAGE_KEY as LANGUAGE_KEY,
    REQUEST_ID_KEY as REQUEST_ID_KEY,
    RESPONSE_PROFILE_KEY as RESPONSE_PROFILE_KEY,
)
from .factory import (
    ParamFactory as ParamFactory,
    user_id as user_id,
    currency as currency,
    language as language,
    session_token as session_token,
    response_profile as response_profile,
    request_correlation_id as request_correlation_id,
)
