from pydantic import BaseModel

from medfinder.schemas.common import Location


class PharmacyBase(BaseModel):
    id: int
    name: str
    address: str
    phone: str
    lat: float
    lon: float

    class Config:
        from_attributes = True
        frozen = True


class PharmacyOwner(BaseModel):
    name: str
    phone: str
    address: str


class PharmacyRegister(BaseModel):
    owner: PharmacyOwner
    location: Location
