# foodswipe/models/request_models.py
from pydantic import BaseModel, ConfigDict, Field


class UserLocation(BaseModel):
    latitude: float
    longitude: float


class RecommendQuery(BaseModel):
    # query string names used by the mobile client
    user_lat: float = Field(..., alias="userLat", allow_inf_nan=False)
    user_lng: float = Field(..., alias="userLng", allow_inf_nan=False)

    def to_location(self) -> UserLocation:
        return UserLocation(latitude=self.user_lat, longitude=self.user_lng)


class SuggestionRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    message: str = Field(..., min_length=1)
