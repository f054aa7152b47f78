"""Self-rescheduling poller that refreshes TfL line statuses."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import threading
import time
from typing import Callable, Mapping, Sequence

from tfl_status.data.cache_control import extract_max_age
from tfl_status.data.tfl_client import TfLClient, TfLClientError
from tfl_status.logic.classifier import DisplayEntry, build_display_entries, classify, parse_line_statuses
from tfl_status.logic.lines import LINE_STYLES, LineStyle

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_INTERVAL_SECONDS = 300

RenderSink = Callable[[Sequence[DisplayEntry]], None]
TimerFactory = Callable[[float, Callable[[], None]], threading.Timer]


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one fetch cycle: entries on success, a reason on failure."""

    entries: list[DisplayEntry]
    max_age: int | None
    fetched_at: float
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class StatusPoller:
    """Fetches, classifies and renders line statuses on a server-driven schedule.

    Two mechanisms trigger a refresh: a one-shot timer armed after each
    successful fetch from the response's max-age, and a fallback loop that
    refreshes every ``fallback_interval_seconds`` regardless of server hints.
    Only one server-driven timer is pending at a time; arming a new one
    cancels the previous one.
    At most one refresh runs at a time; a refresh that finds another in flight
    is skipped.
    """

    def __init__(
        self,
        client: TfLClient,
        modes: str,
        show_names: bool,
        render: RenderSink | None = None,
        fallback_interval_seconds: float = DEFAULT_FALLBACK_INTERVAL_SECONDS,
        timer_factory: TimerFactory = threading.Timer,
        styles: Mapping[str, LineStyle] = LINE_STYLES,
    ) -> None:
        self._client = client
        self._modes = modes
        self._show_names = show_names
        self._render = render
        self._fallback_interval_seconds = fallback_interval_seconds
        self._timer_factory = timer_factory
        self._styles = styles
        self._latest: FetchResult | None = None
        self._lock = threading.Lock()
        self._in_flight = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._next_timer: threading.Timer | None = None

    def get_latest(self) -> FetchResult | None:
        """Return the most recent fetch result, if any."""
        with self._lock:
            return self._latest

    def start(self) -> None:
        """Fetch immediately and start the fallback refresh loop."""
        if self._thread and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run_loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the fallback loop and cancel any pending server-driven timers."""
        self._stop_event.set()
        with self._lock:
            timer, self._next_timer = self._next_timer, None
        if timer is not None:
            timer.cancel()

    def refresh(self) -> FetchResult | None:
        """Run one fetch cycle with the configured modes, unless one is already running."""
        if self._stop_event.is_set():
            return None
        if not self._in_flight.acquire(blocking=False):
            logger.debug("Skipping refresh; another fetch is in flight")
            return None
        try:
            result = self.fetch_status(self._modes, self._show_names)
        finally:
            self._in_flight.release()
        with self._lock:
            self._latest = result
        return result

    def fetch_status(self, modes: str, show_names: bool) -> FetchResult:
        """Fetch, classify, render and reschedule; failures yield an empty result."""
        try:
            response = self._client.get_line_statuses(modes)
            max_age = extract_max_age(response.cache_control)
            records = parse_line_statuses(response.lines)
        except TfLClientError as exc:
            logger.warning("Failed to fetch TfL status for %s: %s", modes, exc)
            return FetchResult(entries=[], max_age=None, fetched_at=time.time(), error=str(exc))

        classification = classify(records, show_names, self._styles)
        entries = build_display_entries(classification, show_names)

        if self._render is not None:
            try:
                self._render(entries)
            except Exception as exc:
                logger.exception("Failed to render TfL status")
                return FetchResult(entries=[], max_age=None, fetched_at=time.time(), error=str(exc))

        logger.info(
            "Fetched TfL status for %s: %d disrupted, max-age %s",
            modes,
            len(classification.entries),
            max_age,
        )
        self.schedule_next(max_age)
        return FetchResult(entries=entries, max_age=max_age, fetched_at=time.time())

    def schedule_next(self, interval: int | None) -> None:
        """Arm one refresh after ``interval`` seconds; a None interval arms nothing."""
        if interval is None or self._stop_event.is_set():
            return
        if interval > threading.TIMEOUT_MAX:
            logger.warning("Ignoring max-age %ss; longer than the longest supported wait", interval)
            return
        timer = self._timer_factory(interval, self.refresh)
        timer.daemon = True
        with self._lock:
            previous, self._next_timer = self._next_timer, timer
        if previous is not None:
            previous.cancel()
        timer.start()
        logger.debug("Next refresh in %ss", interval)

    def _run_loop(self) -> None:
        while not self._stop_event.is_set():
            self.refresh()
            self._stop_event.wait(timeout=self._fallback_interval_seconds)


__all__ = ["DEFAULT_FALLBACK_INTERVAL_SECONDS", "FetchResult", "StatusPoller"]
