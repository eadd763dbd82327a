from iss_flyover.models.common import LookupStage


class AppError(Exception):
    """Base application error for the ISS flyover service."""


class LookupStepError(AppError):
    """Base error for a failed lookup step.

    `stage` names the step of the chain that produced the error. Clients set it
    when raising; the orchestrator fills it in if a collaborator left it unset.
    """

    def __init__(self, message: str, stage: LookupStage | None = None) -> None:
        super().__init__(message)
        self.stage = stage


class NetworkError(LookupStepError):
    """Raised when the request never produced a response (DNS, connect, timeout)."""


class HTTPStatusError(LookupStepError):
    """Raised when an upstream service answers with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str, stage: LookupStage | None = None) -> None:
        super().__init__(f"HTTP {status_code} from {stage.value if stage else 'upstream'} lookup: {body}", stage)
        self.status_code = status_code
        self.body = body


class ParseError(LookupStepError):
    """Raised when a response body is not the expected JSON shape."""


class ServiceReportedError(LookupStepError):
    """Raised when the upstream payload itself reports an unsuccessful lookup.

    The message is the provider's own text, unmodified.
    """

    def __init__(self, message: str, ip: str | None = None, stage: LookupStage | None = None) -> None:
        super().__init__(message, stage)
        self.message = message
        self.ip = ip
