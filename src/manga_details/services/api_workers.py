"""Async workers for non-blocking detail loads using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from manga_details.services.detail_aggregator import DetailAggregator, ItemNotFoundError


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    not_found = Signal(str)
    detail_result = Signal(object)  # DetailView


class DetailLoadWorker(QRunnable):
    """
    Worker that runs a full detail aggregation in a background thread.

    Emits detail_result on success, not_found when the manga record is
    missing, and error for anything unexpected.
    """

    def __init__(self, aggregator: DetailAggregator, item_id: str):
        super().__init__()
        self.aggregator = aggregator
        self.item_id = item_id
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the aggregation in background thread."""
        try:
            view = self.aggregator.load_detail(self.item_id)
            self.signals.detail_result.emit(view)
        except ItemNotFoundError as e:
            self.signals.not_found.emit(str(e))
        except Exception as e:
            # Catch any unexpected exceptions not handled by the aggregator
            self.signals.error.emit(f"Unexpected error loading {self.item_id}: {e}")
        finally:
            self.signals.finished.emit()
