from .param import (
    Param as Param,
    AnyParam as AnyParam,
    ScalarParam as ScalarParam,
    ParamPlacement as ParamPlacement,
    StructuredParam as StructuredParam,
)
from .response_profile import ResponseProfileType as ResponseProfileType, DetachedResponseProfile as DetachedResponseProfile
