"""Status payload used by the API health-check."""

from investcalc import __version__
from investcalc.schemas.health import HealthResponse


def get_health() -> HealthResponse:
    """Return a static "ok" status along with the running version."""
    return HealthResponse(status="ok", version=__version__)
