"""One-time, best-effort provider startup."""

from __future__ import annotations

import dataclasses
import enum
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class StartupStatus(enum.Enum):
    """Outcome of the one-time startup step."""

    SUCCESS = "success"
    WARNING = "warning"
    SKIPPED = "skipped"


@dataclasses.dataclass(frozen=True)
class StartupResult:
    """What happened during startup.

    A ``WARNING`` result carries the exception that was absorbed. Callers may
    inspect it, but the provider works the same either way.

    :param status: Outcome of the startup step.
    :param error: The absorbed exception, for ``WARNING`` results.
    :param detail: Short description (e.g. the registered format file).
    """

    status: StartupStatus
    error: Exception | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.status is not StartupStatus.WARNING


class OneTimeInitializer:
    """Runs a startup step at most once, however many threads ask for it.

    Exceptions raised by the step are absorbed into a ``WARNING``
    :class:`StartupResult`; they never reach the caller.

    The step itself is supplied by whoever calls :meth:`run` first.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._result: StartupResult | None = None

    @property
    def done(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> StartupResult | None:
        return self._result

    def run(self, step: Callable[[], StartupResult]) -> StartupResult:
        """Run ``step`` unless a step already ran, and return the stored result."""
        result = self._result
        if result is not None:
            return result
        with self._lock:
            if self._result is None:
                try:
                    self._result = step()
                except Exception as exc:  # noqa: BLE001
                    self._result = StartupResult(StartupStatus.WARNING, error=exc)
            return self._result

    def reset(self) -> None:
        """Forget the stored result so the step runs again on the next call."""
        with self._lock:
            self._result = None
