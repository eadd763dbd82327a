from pydantic import BaseModel

from iss_flyover.models.common import LookupStage, OverpassWindow


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""

    status: str


class PassesResponse(BaseModel):
    """Response model for the upcoming ISS passes endpoint."""

    passes: list[OverpassWindow]


class ErrorResponse(BaseModel):
    """Error body returned when one of the upstream lookups fails."""

    code: str
    message: str
    stage: LookupStage | None = None
    upstream_status_code: int | None = None
