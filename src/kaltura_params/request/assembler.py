import logging
from enum import Enum
from typing import Any, Iterable, Iterator, Optional

import httpx
from pydantic import BaseModel

from ..types import Param
from ..errors import InvalidHeaderError, DuplicateParamError

logger = logging.getLogger(__name__)

__all__ = ["DuplicateKeyPolicy", "RequestParams"]


class DuplicateKeyPolicy(str, Enum):
    LAST_WINS = "last_wins"
    FIRST_WINS = "first_wins"
    ERROR = "error"


def to_request_value(value: Any) -> Any:
    if hasattr(value, "to_request_object"):
        return value.to_request_object()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True, by_alias=True)
    if isinstance(value, dict):
        return {key: to_request_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_request_value(item) for item in value]
    return value


class RequestParams:
    """
    Ordered collection of params for one request.

    Params with the same key are resolved by the policy: the later one replaces
    the earlier one (LAST_WINS), is dropped (FIRST_WINS), or raises
    DuplicateParamError (ERROR). Body params end up in the JSON payload,
    header params become HTTP headers.
    """

    def __init__(
        self,
        params: Optional[Iterable[Param]] = None,
        policy: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS,
    ):
        self.policy = DuplicateKeyPolicy(policy)
        self._params: dict[str, Param] = {}
        if params:
            self.extend(params)

    def add(self, param: Param) -> "RequestParams":
        existing = self._params.get(param.key)
        if existing is not None:
            if self.policy == DuplicateKeyPolicy.ERROR:
                raise DuplicateParamError(param.key)
            if self.policy == DuplicateKeyPolicy.FIRST_WINS:
                logger.debug(f"Ignoring duplicate param '{param.key}'")
                return self
            logger.debug(f"Overriding param '{param.key}'")
            # keep the position of the first occurrence
        self._params[param.key] = param
        return self

    def extend(self, params: Iterable[Param]) -> "RequestParams":
        for param in params:
            self.add(param)
        return self

    def __len__(self) -> int:
        return len(self._params)

    def __iter__(self) -> Iterator[Param]:
        return iter(self._params.values())

    def __contains__(self, key: object) -> bool:
        return key in self._params

    def get(self, key: str) -> Optional[Param]:
        return self._params.get(key)

    def keys(self) -> list[str]:
        return list(self._params)

    def body(self) -> dict[str, Any]:
        return {param.key: to_request_value(param.value) for param in self if param.in_body}

    def headers(self) -> dict[str, str]:
        return {param.key: str(param.value) for param in self if not param.in_body}

    def build_request(
        self,
        method: str,
        url: str,
        body: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> httpx.Request:
        """
        Assemble, but do not send, an HTTP request carrying these params.

        Args:
            method: HTTP method, e.g. "POST".
            url: Full service action url.
            body: Extra payload fields; params with the same key take precedence.
            headers: Default headers; header params with the same name take precedence.

        Raises:
            InvalidHeaderError: A header param value is not ASCII.
        """
        param_headers = self.headers()
        for key, value in param_headers.items():
            if not value.isascii():
                raise InvalidHeaderError(key, value)

        payload = {**(body or {}), **self.body()}
        request_headers = {
            "accept": "application/json",
            "Content-Type": "application/json",
            **(headers or {}),
            **param_headers,
        }
        logger.debug(f"Building {method} {url} with params: {', '.join(self.keys())}")
        return httpx.Request(method, url, json=payload, headers=request_headers)
