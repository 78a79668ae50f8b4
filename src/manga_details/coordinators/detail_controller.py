"""Detail Controller - Owns the state of the manga detail screen."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from manga_details.core import DetailView
from manga_details.io import LibraryStore
from manga_details.services import DetailAggregator, DetailLoadWorker

logger = logging.getLogger(__name__)

ADDED_LABEL = "Added"
ADD_LABEL = "Add to Library"


class LoadStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class DetailState:
    """What the detail screen should display."""

    status: LoadStatus
    item_id: Optional[str] = None
    view: Optional[DetailView] = None


IDLE_STATE = DetailState(status=LoadStatus.IDLE)


class _DetailRequest(QObject):
    """Helper class to hold load request context and route results safely."""

    def __init__(self, item_id: str, request_id: int, parent: "DetailController"):
        super().__init__()
        self.item_id = item_id
        self.request_id = request_id
        self.parent_ref = parent

    @Slot(object)
    def on_detail_result(self, view):
        self.parent_ref._handle_detail_result(view, self.request_id)

    @Slot(str)
    def on_not_found(self, message: str):
        self.parent_ref._handle_not_found(message, self.request_id)

    @Slot(str)
    def on_error(self, message: str):
        self.parent_ref._handle_error(message, self.request_id)


class DetailController(QObject):
    """
    Drives the detail screen for one manga at a time.

    Responsibilities:
    - Run the aggregator off the UI thread when an item is opened.
    - Drop results of loads that were superseded or closed.
    - Track whether the shown manga is in the library and toggle it.
    """

    state_changed = Signal(object)  # DetailState
    saved_changed = Signal(bool)
    load_failed = Signal(str)

    def __init__(
        self,
        aggregator: DetailAggregator,
        library_store: LibraryStore,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        if aggregator is None:
            raise ValueError("DetailAggregator must not be None")
        if library_store is None:
            raise ValueError("LibraryStore must not be None")

        self.aggregator = aggregator
        self.library_store = library_store
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self._state = IDLE_STATE
        self._is_saved = False

        # Only the active request may update state
        self._active_request_id: Optional[int] = None
        self._request_counter = 0
        # Keep a reference so the helper outlives the worker
        self._request_helper: Optional[_DetailRequest] = None

    @property
    def state(self) -> DetailState:
        return self._state

    @property
    def is_saved(self) -> bool:
        return self._is_saved

    @property
    def button_label(self) -> str:
        return ADDED_LABEL if self._is_saved else ADD_LABEL

    def open_item(self, item_id: str) -> None:
        """
        Start loading a manga, discarding whatever was shown before.

        Args:
            item_id: Remote manga identifier.
        """
        if not item_id:
            raise ValueError("Item id must not be empty")

        self._request_counter += 1
        request_id = self._request_counter
        self._active_request_id = request_id

        self._set_saved(False)
        self._set_state(DetailState(status=LoadStatus.LOADING, item_id=item_id))

        worker = DetailLoadWorker(aggregator=self.aggregator, item_id=item_id)
        helper = _DetailRequest(item_id, request_id, self)
        self._request_helper = helper

        worker.signals.detail_result.connect(helper.on_detail_result)
        worker.signals.not_found.connect(helper.on_not_found)
        worker.signals.error.connect(helper.on_error)

        logger.debug("Loading manga %s (request %d)", item_id, request_id)
        self.thread_pool.start(worker)

    def close(self) -> None:
        """Tear down the screen; any load still in flight is ignored."""
        self._active_request_id = None
        self._request_helper = None
        self._is_saved = False
        self._state = IDLE_STATE

    def toggle_save(self) -> None:
        """Add the shown manga to the library, or remove it if already saved."""
        view = self._state.view
        if self._state.status is not LoadStatus.LOADED or view is None:
            logger.debug("Ignoring save toggle while %s", self._state.status.value)
            return

        try:
            if self._is_saved:
                self.library_store.remove(view.item_id)
            else:
                self.library_store.add(view.to_library_entry())
        except RuntimeError as e:
            logger.error("Failed to update library for %s: %s", view.item_id, e)
            return

        self._set_saved(not self._is_saved)

    def _handle_detail_result(self, view: DetailView, request_id: int) -> None:
        if request_id != self._active_request_id:
            logger.debug("Ignoring stale detail result (request %d)", request_id)
            return
        self._set_state(DetailState(status=LoadStatus.LOADED, item_id=view.item_id, view=view))
        self._set_saved(view.is_saved)

    def _handle_not_found(self, message: str, request_id: int) -> None:
        if request_id != self._active_request_id:
            return
        logger.info(message)
        self._set_state(DetailState(status=LoadStatus.NOT_FOUND, item_id=self._state.item_id))

    def _handle_error(self, message: str, request_id: int) -> None:
        # State stays LOADING; there is no error state on this screen.
        if request_id != self._active_request_id:
            return
        logger.error(message)
        self.load_failed.emit(message)

    def _set_state(self, state: DetailState) -> None:
        self._state = state
        self.state_changed.emit(state)

    def _set_saved(self, saved: bool) -> None:
        if saved == self._is_saved:
            return
        self._is_saved = saved
        self.saved_changed.emit(saved)
