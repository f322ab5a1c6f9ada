"""
Font Resolver - Asynchronous font request lifecycle

PURPOSE: Send one query at a time to the font provider on a background thread and report
         the outcome back through Qt signals.
CONTEXT: The request button is disabled while a request runs, so at most one request is
         ever in flight and callbacks arrive in submission order.

STATE MACHINE:
    IDLE ──submit()──► IN_FLIGHT ──on_font_retrieved()──► SUCCEEDED ──► IDLE
                           │
                           └──on_font_request_failed()──► FAILED ──► IDLE

USAGE:
    >>> resolver = FontResolutionWorkflow(GoogleFontsProvider())
    >>> resolver.submit_state_changed.connect(on_submit_state)
    >>> resolver.font_resolved.connect(on_font)
    >>> resolver.font_failed.connect(on_error)
    >>> resolver.submit(build_query("Roboto", parameters))
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from PySide6.QtCore import QMutex, QMutexLocker, QObject, QRunnable, QThreadPool, Signal

from config import FONT_THREAD_NAME
from core.font_provider import FailureReason, FontProvider, ResolvedFont
from utils.error_handler import FontRequestInFlightError, FontResolutionError, error_handler
from utils.i18n import t
from utils.logger import get_logger

logger = get_logger()


class RequestState(Enum):
    """State of the font request workflow"""
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class RequestOutcome:
    """Terminal result of one request"""
    state: RequestState
    query: str
    handle: Optional[ResolvedFont] = None
    reason: Optional[int] = None
    message: Optional[str] = None
    error: Optional[FontResolutionError] = None


def failure_message(reason: int) -> str:
    """User-visible message for a provider reason code"""
    return t("font.request_failed", fallback="Font request failed with reason {reason}", reason=reason)


class FontRequestWorker(QRunnable):
    """
    Runs one provider request on the font thread.

    WHY: The provider call may block on network I/O and must never run on the GUI thread
    """

    def __init__(self, workflow: "FontResolutionWorkflow", query: str):
        super().__init__()
        self.workflow = workflow
        self.query = query

    def run(self):
        try:
            self.workflow.provider.request_font(
                self.query,
                self.workflow.on_font_retrieved,
                self.workflow.on_font_request_failed,
            )
        except Exception as e:
            error_handler.log_error(e, context={"query": self.query})
            self.workflow.on_font_request_failed(FailureReason.FONT_LOAD_ERROR)
            return

        if self.workflow.state is RequestState.IN_FLIGHT:
            logger.warning(f"Provider returned without an outcome for query: {self.query}")
            self.workflow.on_font_request_failed(FailureReason.FONT_LOAD_ERROR)


class FontResolutionWorkflow(QObject):
    """
    Owns the request state and the single background thread used for provider calls.

    Signals are emitted from the font thread; receivers living in the GUI thread get
    them through Qt's queued connections.
    """

    state_changed = Signal(object)  # RequestState
    submit_state_changed = Signal(bool, bool)  # (submit_enabled, progress_visible)
    font_resolved = Signal(object)  # ResolvedFont
    font_failed = Signal(str)  # user-visible message

    def __init__(self, provider: FontProvider, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.provider = provider
        self._state = RequestState.IDLE
        self._query: Optional[str] = None
        self._last_outcome: Optional[RequestOutcome] = None
        self._mutex = QMutex()

        # One long-lived worker thread, never a pool
        self._thread_pool = QThreadPool(self)
        self._thread_pool.setObjectName(FONT_THREAD_NAME)
        self._thread_pool.setMaxThreadCount(1)
        self._thread_pool.setExpiryTimeout(-1)

    @property
    def state(self) -> RequestState:
        with QMutexLocker(self._mutex):
            return self._state

    @property
    def last_outcome(self) -> Optional[RequestOutcome]:
        with QMutexLocker(self._mutex):
            return self._last_outcome

    @property
    def is_idle(self) -> bool:
        return self.state is RequestState.IDLE

    def submit(self, query: str):
        """
        Dispatch a query to the provider.

        Raises:
            FontRequestInFlightError: If a request is already in flight
        """
        with QMutexLocker(self._mutex):
            if self._state is not RequestState.IDLE:
                raise FontRequestInFlightError(
                    context={"pending_query": self._query, "rejected_query": query}
                )
            self._state = RequestState.IN_FLIGHT
            self._query = query

        logger.log_font_request(query)
        self.state_changed.emit(RequestState.IN_FLIGHT)
        self.submit_state_changed.emit(False, True)

        self._thread_pool.start(FontRequestWorker(self, query))

    def on_font_retrieved(self, handle: ResolvedFont):
        """Success callback from the provider; the handle is passed on untouched"""
        query = self._finish(RequestState.SUCCEEDED)
        if query is None:
            logger.warning("Ignoring font delivered while no request is in flight")
            return

        try:
            logger.log_font_resolved(query, getattr(handle, "size_bytes", None))
            self._record(RequestOutcome(RequestState.SUCCEEDED, query, handle=handle))

            self.state_changed.emit(RequestState.SUCCEEDED)
            self.font_resolved.emit(handle)
        finally:
            self._return_to_idle()

    def on_font_request_failed(self, reason: int):
        """Failure callback from the provider"""
        query = self._finish(RequestState.FAILED)
        if query is None:
            logger.warning(f"Ignoring failure {reason} delivered while no request is in flight")
            return

        try:
            reason = int(reason)
            message = failure_message(reason)
            logger.log_font_failed(query, reason)
            error = FontResolutionError(reason, context={"query": query})
            self._record(RequestOutcome(RequestState.FAILED, query, reason=reason, message=message, error=error))

            self.state_changed.emit(RequestState.FAILED)
            self.font_failed.emit(message)
        finally:
            self._return_to_idle()

    def wait_for_done(self, msecs: int = -1) -> bool:
        """Block until the font thread has no running request"""
        return self._thread_pool.waitForDone(msecs)

    def shutdown(self):
        self._thread_pool.clear()
        self._thread_pool.waitForDone()

    def _finish(self, terminal_state: RequestState) -> Optional[str]:
        with QMutexLocker(self._mutex):
            if self._state is not RequestState.IN_FLIGHT:
                return None
            self._state = terminal_state
            return self._query

    def _record(self, outcome: RequestOutcome):
        with QMutexLocker(self._mutex):
            self._last_outcome = outcome

    def _return_to_idle(self):
        with QMutexLocker(self._mutex):
            self._state = RequestState.IDLE
            self._query = None

        self.submit_state_changed.emit(True, False)
        self.state_changed.emit(RequestState.IDLE)
