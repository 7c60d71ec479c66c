from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PlatformDescriptor(BaseModel):
    model_config = ConfigDict(extra="allow")

    uri: str | None = None
    width: int | None = None
    height: int | None = None
    scale: float | None = None

    def to_tree_value(self) -> dict[str, Any]:
        """Plain dict form written into configuration trees."""
        return self.model_dump(exclude_none=True)


class EditorResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image: str
    has_changes: bool = Field(default=False, alias="hasChanges")
    serialization: Any | None = None
