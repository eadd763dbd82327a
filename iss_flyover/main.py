from typing import Annotated

from fastapi import Depends, FastAPI, Request, status

from iss_flyover.errors import LookupStepError
from iss_flyover.exception_handlers import lookup_step_exception_handler, unhandled_exception_handler
from iss_flyover.logger import logger
from iss_flyover.models.response_models import ErrorResponse, HealthResponse, PassesResponse
from iss_flyover.orchestrator import FlyoverOrchestrator, build_orchestrator

app = FastAPI(
    title="ISS Flyover Service",
    version="0.1.0",
    description="Upcoming ISS passes for the location the service is running at.",
)
logger.info("Started ISS Flyover Service")


def get_orchestrator() -> FlyoverOrchestrator:
    """Dependency to provide a FlyoverOrchestrator wired from the environment."""
    return build_orchestrator()


app.add_exception_handler(LookupStepError, lookup_step_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


@app.get(
    "/health",
    tags=["health"],
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def health() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(status="ok")


@app.get(
    "/v1/iss/passes",
    response_model=PassesResponse,
    status_code=status.HTTP_200_OK,
    tags=["iss"],
    summary="Upcoming ISS passes for the service's current location.",
    responses={status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse}},
)
async def iss_passes(
    request: Request,
    orchestrator: Annotated[FlyoverOrchestrator, Depends(get_orchestrator)],
) -> PassesResponse:
    """Resolve the public IP, geolocate it and return the predicted ISS passes.

    Upstream lookup failures are rendered by `lookup_step_exception_handler`.
    """
    logger.info(f"Looking up ISS passes path={request.url.path} method={request.method}")
    passes = await orchestrator.next_iss_times_for_my_location()
    return PassesResponse(passes=passes)
