from collections.abc import Iterable
from datetime import tzinfo

from iss_flyover.models.common import OverpassWindow


def format_pass(window: OverpassWindow, tz: tzinfo | None = None) -> str:
    """Render a pass as `Next pass at <datetime> for <duration> seconds!`.

    The rise time is shown in `tz`, or in the local timezone when omitted.
    Rise times outside the datetime range are shown as the raw epoch.
    """
    try:
        rise_at = f"{window.rise_at.astimezone(tz):%a %b %d %Y %H:%M:%S %Z}"
    except (OverflowError, ValueError, OSError):
        rise_at = f"epoch {window.risetime}"
    return f"Next pass at {rise_at} for {window.duration} seconds!"


def format_passes(windows: Iterable[OverpassWindow], tz: tzinfo | None = None) -> list[str]:
    return [format_pass(window, tz) for window in windows]
