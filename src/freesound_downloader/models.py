"""Constants and request value objects for the Freesound API.

Constants:
    BASE_URL        -- Root of the Freesound APIv2 endpoints.
    SEARCH_ENDPOINT -- Text search resource, relative to BASE_URL.
    DEFAULT_FIELDS  -- Fields requested by advanced search.
    DEFAULT_TIMEOUT -- Seconds before any outbound request is abandoned.

Requests:
    SearchRequest   -- Text search parameters. Values are forwarded as-is;
                       page and page_size are not bounds-checked locally.
    DownloadRequest -- Sound id plus destination path.
"""

from dataclasses import dataclass
from pathlib import Path

BASE_URL = "https://freesound.org/apiv2/"
SEARCH_ENDPOINT = "search/text/"

DEFAULT_FIELDS = "id,name,username,description,tags,preview-hq-mp3,duration"
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 15
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class SearchRequest:
    """Parameters for a text search against SEARCH_ENDPOINT."""

    query: str
    filter: str | None = None
    sort: str | None = None
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE
    group_by_pack: bool = False
    weights: str | None = None

    def basic_params(self) -> dict[str, str]:
        """Query parameters for the plain search: query, page, page_size."""
        return {
            "query": self.query,
            "page": str(self.page),
            "page_size": str(self.page_size),
        }

    def advanced_params(self) -> dict[str, str]:
        """Query parameters for the advanced search.

        fields and group_by_pack are always sent; filter, sort and weights
        only when given.
        """
        params = self.basic_params()
        params["fields"] = DEFAULT_FIELDS
        if self.filter is not None:
            params["filter"] = self.filter
        if self.sort is not None:
            params["sort"] = self.sort
        params["group_by_pack"] = "1" if self.group_by_pack else "0"
        if self.weights is not None:
            params["weights"] = self.weights
        return params


@dataclass(frozen=True)
class DownloadRequest:
    sound_id: int
    output_path: Path

    def endpoint(self) -> str:
        return f"sounds/{self.sound_id}/download/"
