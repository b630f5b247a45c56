from eveapi.models.bookmarks.corporation_bookmark import CorporationBookmark
from eveapi.models.bookmarks.corporation_bookmark_folder import CorporationBookmarkFolder

__all__ = ["CorporationBookmark", "CorporationBookmarkFolder"]
