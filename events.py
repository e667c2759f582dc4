"""
Event emission for block results.

The workflow host hands each invocation its own emit callable. EventEmitter
is the in-process equivalent used by the Lambda entry point.
"""
from typing import Any, Dict, List, Optional
from logger_config import get_logger

logger = get_logger(__name__)


class EventEmitter:
    """Collects the events emitted by block invocations."""

    def __init__(self) -> None:
        self.emitted: List[Dict[str, Any]] = []

    def emit(self, payload: Dict[str, Any]) -> None:
        """
        Publish one result event.

        Args:
            payload: Event payload produced by the block
        """
        self.emitted.append(payload)
        logger.debug(f'Emitted event #{len(self.emitted)}')

    __call__ = emit

    @property
    def last(self) -> Optional[Dict[str, Any]]:
        """Most recent payload, or None if nothing was emitted."""
        return self.emitted[-1] if self.emitted else None
