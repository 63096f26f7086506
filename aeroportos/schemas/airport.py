"""Airport Schemas — wire format of the airport resource.

Invariants:
    - Request and response use the same aliases: id, nome, codigoIata, cidade,
      codigoPaisIso, latitude, longitude, altitude
    - Requests also accept the attribute names (name, iata_code, ...)
    - AirportPayload only enforces JSON types; missing fields become None and are
      reported by validate_airport (so every violation is listed at once)
    - Client-supplied id and unknown keys are ignored
    - NaN and Infinity are rejected at parse time (400 VALIDATION_FAILED)

Design Decisions:
    - One payload schema for POST and PUT: PUT ignores codigoIata, it does not forbid it
"""

from pydantic import BaseModel, ConfigDict, Field

from aeroportos.core.domain_types import AirportFields


class AirportPayload(BaseModel):
    """Airport body for create and update."""
    model_config = ConfigDict(
        populate_by_name=True, extra="ignore", allow_inf_nan=False,
    )

    name: str | None = Field(None, alias="nome")
    iata_code: str | None = Field(None, alias="codigoIata")
    city: str | None = Field(None, alias="cidade")
    country_code: str | None = Field(None, alias="codigoPaisIso")
    latitude: float | None = None
    longitude: float | None = None
    altitude: float | None = None

    def to_fields(self) -> AirportFields:
        return AirportFields(
            name=self.name,
            iata_code=self.iata_code,
            city=self.city,
            country_code=self.country_code,
            latitude=self.latitude,
            longitude=self.longitude,
            altitude=self.altitude,
        )


class AirportResponse(BaseModel):
    """Airport as returned by the API (read from the ORM model by attribute name)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str = Field(serialization_alias="nome")
    iata_code: str = Field(serialization_alias="codigoIata")
    city: str = Field(serialization_alias="cidade")
    country_code: str = Field(serialization_alias="codigoPaisIso")
    latitude: float
    longitude: float
    altitude: float
