from fastapi.testclient import TestClient

from iss_flyover.errors import HTTPStatusError, NetworkError, ParseError, ServiceReportedError
from iss_flyover.main import app, get_orchestrator
from iss_flyover.models.common import LookupStage, OverpassWindow


class _StubOrchestrator:
    """Test double for FlyoverOrchestrator returning passes or raising a configured exception."""

    def __init__(self, passes: list[OverpassWindow] | None = None, exc: Exception | None = None) -> None:
        self._passes = passes or []
        self._exc = exc

    async def next_iss_times_for_my_location(self) -> list[OverpassWindow]:
        if self._exc is not None:
            raise self._exc
        return self._passes


def _call_passes(orchestrator: _StubOrchestrator) -> tuple[int, dict]:
    """Helper that wires a stub orchestrator and calls the /v1/iss/passes endpoint."""
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    client = TestClient(app)
    try:
        response = client.get("/v1/iss/passes")
        return response.status_code, response.json()
    finally:
        app.dependency_overrides.clear()


def test_health() -> None:
    response = TestClient(app).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_passes_success() -> None:
    passes = [
        OverpassWindow(risetime=134564234, duration=600),
        OverpassWindow(risetime=134570000, duration=480),
    ]
    status_code, body = _call_passes(_StubOrchestrator(passes=passes))

    assert status_code == 200
    assert body == {
        "passes": [
            {"risetime": 134564234, "duration": 600},
            {"risetime": 134570000, "duration": 480},
        ]
    }


def test_passes_maps_network_error_to_502() -> None:
    status_code, body = _call_passes(
        _StubOrchestrator(exc=NetworkError("Request to ip provider failed", stage=LookupStage.ip))
    )

    assert status_code == 502
    assert body["code"] == "upstream_unreachable"
    assert body["stage"] == "ip"
    assert body["upstream_status_code"] is None


def test_passes_maps_http_status_error_to_502_with_upstream_code() -> None:
    status_code, body = _call_passes(
        _StubOrchestrator(exc=HTTPStatusError(500, "boom", stage=LookupStage.overpass))
    )

    assert status_code == 502
    assert body["code"] == "upstream_status"
    assert body["stage"] == "overpass"
    assert body["upstream_status_code"] == 500
    assert "boom" in body["message"]


def test_passes_maps_parse_error_to_502() -> None:
    status_code, body = _call_passes(_StubOrchestrator(exc=ParseError("bad payload", stage=LookupStage.overpass)))

    assert status_code == 502
    assert body["code"] == "upstream_bad_payload"


def test_passes_maps_service_reported_error_to_502_with_message() -> None:
    status_code, body = _call_passes(
        _StubOrchestrator(exc=ServiceReportedError("Reserved range", stage=LookupStage.geolocation))
    )

    assert status_code == 502
    assert body["code"] == "upstream_rejected"
    assert body["stage"] == "geolocation"
    assert body["message"] == "Reserved range"


def test_passes_unexpected_error_returns_500() -> None:
    app.dependency_overrides[get_orchestrator] = lambda: _StubOrchestrator(exc=RuntimeError("bug"))
    client = TestClient(app, raise_server_exceptions=False)
    try:
        response = client.get("/v1/iss/passes")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json()["code"] == "internal_error"
