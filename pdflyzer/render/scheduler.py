"""
Debounced highlight passes.

Page, zoom and annotation changes each request a highlight pass. A
request waits a short delay for the rendering engine to settle; a newer
request cancels the pending one, so only the latest pass runs.
"""

import threading
from typing import Callable, List, Optional, Sequence, Tuple, Union

from ..core import get_logger
from ..search.models import AnnotatedMatch
from .mapper import HighlightMapper
from .models import Overlay, TextLayer

logger = get_logger(__name__)


LayerSource = Union[TextLayer, Callable[[], Optional[TextLayer]], None]


class HighlightScheduler:
    """
    Runs at most one highlight pass per burst of requests.

    The layer may be given as a callable; it is resolved when the pass
    runs, so the pass sees the text layer as laid out after the delay.
    """

    def __init__(self, mapper: HighlightMapper = None, delay: float = 0.1):
        """
        Args:
            mapper: Mapper that computes overlays.
            delay: Seconds to wait before running a pass.
        """
        self.mapper = mapper or HighlightMapper()
        self.delay = delay

        self._condition = threading.Condition()
        self._timer: Optional[threading.Timer] = None
        self._pending: Optional[Tuple[int, LayerSource, List[AnnotatedMatch]]] = None
        self._generation = 0
        self._completed = 0
        self._result: List[Overlay] = []

    @property
    def pending(self) -> bool:
        with self._condition:
            return self._pending is not None

    def request(self, layer: LayerSource, matches: Sequence[AnnotatedMatch]) -> int:
        """
        Schedule a highlight pass, superseding any pass not yet run.

        Returns:
            Ticket identifying this request, for wait().
        """
        with self._condition:
            if self._timer is not None:
                self._timer.cancel()

            self._generation += 1
            ticket = self._generation
            self._pending = (ticket, layer, list(matches))

            self._timer = threading.Timer(self.delay, self._run, args=(ticket,))
            self._timer.daemon = True
            self._timer.start()

        return ticket

    def wait(self, ticket: int, timeout: float = None) -> Optional[List[Overlay]]:
        """
        Block until the pass for a ticket has run.

        Returns:
            The overlays of that pass, or None if it was superseded
            or the timeout expired.
        """
        with self._condition:
            self._condition.wait_for(
                lambda: self._completed >= ticket or self._generation != ticket,
                timeout
            )

            if self._completed == ticket:
                return list(self._result)

        return None

    def flush(self) -> Optional[List[Overlay]]:
        """Run the pending pass now, without waiting for the delay."""
        with self._condition:
            if self._pending is None:
                return None
            ticket = self._pending[0]

            if self._timer is not None:
                self._timer.cancel()

        self._run(ticket)
        return self.wait(ticket, timeout=0)

    def cancel(self) -> None:
        """Drop the pending pass, if any."""
        with self._condition:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None
            self._generation += 1
            self._condition.notify_all()

    def _run(self, ticket: int) -> None:
        with self._condition:
            if self._pending is None or self._pending[0] != ticket:
                logger.debug(f"Highlight pass {ticket} superseded")
                return

            _, layer, matches = self._pending
            self._pending = None

            if callable(layer):
                layer = layer()

            self._result = self.mapper.apply_highlights(layer, matches)
            self._completed = ticket
            self._condition.notify_all()
