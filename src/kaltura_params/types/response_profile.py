from enum import Enum
from typing import Any, Optional

from pydantic import Field, BaseModel, ConfigDict

__all__ = ["ResponseProfileType", "DetachedResponseProfile"]


class ResponseProfileType(str, Enum):
    INCLUDE_FIELDS = "include"
    EXCLUDE_FIELDS = "exclude"


class DetachedResponseProfile(BaseModel):
    """Describes which fields and related objects the server should return."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    type: Optional[ResponseProfileType] = None
    fields: list[str] = Field(default_factory=list)
    related_profiles: list["DetachedResponseProfile"] = Field(default_factory=list, alias="relatedProfiles")
    object_type: str = Field("KalturaDetachedResponseProfile", alias="objectType")

    def to_request_object(self) -> dict[str, Any]:
        result = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        # the server expects a comma separated list
        if self.fields:
            result["fields"] = ",".join(self.fields)
        else:
            result.pop("fields", None)
        if self.related_profiles:
            result["relatedProfiles"] = [profile.to_request_object() for profile in self.related_profiles]
        else:
            result.pop("relatedProfiles", None)
        return result
