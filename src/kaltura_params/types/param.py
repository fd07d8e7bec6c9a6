from enum import Enum
from typing import Any, Union, Literal

from pydantic import Field, BaseModel, ConfigDict
from typing_extensions import Annotated

__all__ = ["Param", "ParamPlacement", "ScalarParam", "StructuredParam", "AnyParam"]


class ParamPlacement(str, Enum):
    BODY = "body"
    HEADER = "header"


class Param(BaseModel):
    """
    A single named request option.

    The key and placement are fixed by the constructor that created the param,
    only the value varies between calls. Instances are frozen.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Parameter name in the request body or header name")
    value: Any = Field(..., description="Parameter payload, passed through untouched")
    in_body: bool = Field(..., description="True for the request body, False for a transport header")

    @property
    def placement(self) -> ParamPlacement:
        return ParamPlacement.BODY if self.in_body else ParamPlacement.HEADER


class ScalarParam(Param):
    kind: Literal["scalar"] = "scalar"
    value: str


class StructuredParam(Param):
    # Any payload; no coercion so the caller's object is kept as is
    kind: Literal["structured"] = "structured"
    value: Any


AnyParam = Annotated[Union[ScalarParam, StructuredParam], Field(discriminator="kind")]
