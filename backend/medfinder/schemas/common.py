from pydantic import BaseModel, Field


class Location(BaseModel):
    """A latitude/longitude pair in degrees. Must be finite; not range-checked."""
    lat: float = Field(allow_inf_nan=False)
    lon: float = Field(allow_inf_nan=False)
