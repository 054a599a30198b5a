"""Protocol for telemetry data sources."""
from typing import Protocol, runtime_checkable, Any


@runtime_checkable
class TelemetrySource(Protocol):
    """Protocol for telemetry data sources.

    Sources implement update() to fetch fresh data and get_state() to return
    the last fetched state. Structural typing, no inheritance needed.
    """

    def update(self) -> None:
        ...

    def get_state(self) -> Any:
        ...
