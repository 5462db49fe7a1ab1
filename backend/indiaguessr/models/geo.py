from pydantic import BaseModel, Field


class GeoPoint(BaseModel):
    """A point on the globe in degrees."""
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., gt=-180.0, le=180.0)

    class Config:
        frozen = True


class Division(BaseModel):
    """Named administrative division with its representative coordinate."""
    name: str = Field(..., min_length=1)
    centroid: GeoPoint

    class Config:
        frozen = True


class DivisionEntry(BaseModel):
    """One record of a divisions JSON file."""
    name: str = Field(..., min_length=1)
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., gt=-180.0, le=180.0)

    def to_division(self) -> Division:
        return Division(name=self.name, centroid=GeoPoint(lat=self.lat, lng=self.lng))
