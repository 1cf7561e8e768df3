"""
Diagnostic reporter.

Diagnostics point at likely misconfiguration (missing reducers, unexpected
state keys). They go to the ``statecore.diagnostics`` logger at WARNING level
and never change runtime behavior. When logging has not been configured,
Python's last-resort handler writes them to stderr.
"""

from typing import Optional

from ..logging_config import get_logger

LOGGER_NAME = "statecore.diagnostics"


class DiagnosticReporter:
    """
    Reports advisory messages. Inert when disabled (production mode).

    Args:
        enabled: False turns report() into a no-op
        name: Trace id attached to every record (typically the composer name)
    """

    def __init__(self, enabled: bool = True, name: Optional[str] = None) -> None:
        self.enabled = enabled
        self._logger = get_logger(LOGGER_NAME, trace_id=name)

    def report(self, message: str) -> None:
        if not self.enabled or not message:
            return
        self._logger.warning(message)

