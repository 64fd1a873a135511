"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field


class FloorSchema(BaseModel):
    """Floor dimensions in configured units."""

    width: float = Field(..., description="Floor width")
    height: float = Field(..., description="Floor height")


class PlacedRoomSchema(BaseModel):
    """A room instance placed on the floor."""

    instance_id: str = Field(..., description="Unique instance id, '<type id>-<n>'")
    room_type_id: str = Field(..., description="Id of the room type")
    name: str = Field(..., description="Room type display name")
    x: int = Field(..., description="Left edge")
    y: int = Field(..., description="Bottom edge")
    width: float = Field(..., description="Declared width")
    height: float = Field(..., description="Declared height")
    effective_width: float = Field(..., description="Width after rotation")
    effective_height: float = Field(..., description="Height after rotation")
    rotated: bool = Field(default=False, description="Whether the room is rotated 90°")
    color: str = Field(..., description="Display color")
