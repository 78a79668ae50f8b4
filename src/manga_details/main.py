"""Main entry point: load one manga detail headlessly and print it."""

import logging
import sys

from PySide6.QtCore import QCoreApplication

from manga_details.coordinators import DetailController, DetailState, LoadStatus
from manga_details.core import DetailView
from manga_details.io import DatabaseManager, LibraryStore, SqliteSlotStorage
from manga_details.services import DetailAggregator, MangaDexGateway, SettingsManager

USAGE = "usage: manga-details ITEM_ID [--toggle]"


def render_detail(view: DetailView, button_label: str) -> str:
    """Plain-text rendering of a detail view."""
    lines = [view.title]
    if view.has_alt_title:
        lines.append(view.alt_title)
    lines.extend(
        [
            "",
            view.description,
            "",
            f"{view.author_name}, {view.status}, {view.year}",
            f"Genres: {view.genres}",
            f"Cover: {view.cover_url or 'No poster available'}",
            f"[{button_label}]",
            "",
            "Chapters",
        ]
    )
    if view.chapters:
        lines.extend(f"  {chapter.display_label}  ({chapter.link_path})" for chapter in view.chapters)
    else:
        lines.append("  No chapters available")
    return "\n".join(lines)


def main(argv=None):
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    toggle = "--toggle" in args
    args = [arg for arg in args if arg != "--toggle"]
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 2
    item_id = args[0]

    # 1. Configuration and logging
    settings = SettingsManager()
    logging.basicConfig(
        level=settings.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 2. Initialize Application
    app = QCoreApplication.instance() or QCoreApplication([])
    app.setApplicationName("Manga Details")

    # 3. Initialize Infrastructure
    database = DatabaseManager(settings.get_db_path())
    database.ensure_schema()
    library_store = LibraryStore(SqliteSlotStorage(database.connection))
    gateway = MangaDexGateway(
        base_url=settings.get_api_url(),
        timeout=settings.get_request_timeout(),
    )
    aggregator = DetailAggregator(
        gateway=gateway,
        library_store=library_store,
        uploads_base_url=settings.get_uploads_url(),
    )

    # 4. Instantiate Controller (Dependency Injection)
    controller = DetailController(aggregator=aggregator, library_store=library_store)
    exit_code = {"value": 1}

    def on_state_changed(state: DetailState):
        if state.status is LoadStatus.LOADED:
            if toggle:
                controller.toggle_save()
            print(render_detail(state.view, controller.button_label))
            exit_code["value"] = 0
            app.quit()
        elif state.status is LoadStatus.NOT_FOUND:
            print(f"Manga not found: {state.item_id}", file=sys.stderr)
            app.quit()

    def on_load_failed(message: str):
        print(message, file=sys.stderr)
        app.quit()

    # 5. Signal Wiring
    controller.state_changed.connect(on_state_changed)
    controller.load_failed.connect(on_load_failed)

    # 6. Start the load and run the event loop
    controller.open_item(item_id)
    try:
        app.exec()
    finally:
        controller.close()
        gateway.close()
        database.close()

    return exit_code["value"]


if __name__ == "__main__":
    sys.exit(main())
