"""Services layer - remote lookups, aggregation and configuration."""

from manga_details.services.item_gateway import CoverLookup, ItemGateway, ItemLookup
from manga_details.services.mangadex_gateway import MangaDexGateway
from manga_details.services.feed_sorter import chapter_sort_value, sort_feed
from manga_details.services.detail_aggregator import DetailAggregator, ItemNotFoundError
from manga_details.services.settings_manager import SettingsManager
from manga_details.services.api_workers import DetailLoadWorker, WorkerSignals

__all__ = [
	"CoverLookup",
	"DetailAggregator",
	"DetailLoadWorker",
	"ItemGateway",
	"ItemLookup",
	"ItemNotFoundError",
	"MangaDexGateway",
	"SettingsManager",
	"WorkerSignals",
	"chapter_sort_value",
	"sort_feed",
]
