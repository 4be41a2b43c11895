from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional


class RestaurantRecord(BaseModel):
    """Scoring view of a stored restaurant; unknown fields are kept as extras."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Any = Field(None, alias="_id")
    lat: Optional[float] = None
    lng: Optional[float] = None
    netLike: Optional[float] = None
    likeRatio: Optional[float] = None
    avgPrice: Optional[float] = None


class RestaurantPhoto(BaseModel):
    id: str
    url: str
    restaurantId: str
    restaurantName: str
    address: Optional[str] = None
    region: Optional[str] = None


class ApiResponse(BaseModel):
    success: bool
    data: Any = None
    message: Optional[str] = None
