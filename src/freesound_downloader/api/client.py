"""Freesound APIv2 client.

Issues authenticated GET requests against the text search and download
endpoints and hands the raw bodies back to the caller. Search results are
returned as unparsed JSON text; interpreting them (count, results, id, name,
username, duration, ...) is left to the caller.

Every public call returns a value instead of raising: transport errors and
non-200 replies are logged and surface as None (search) or False (download).
Only construction raises, with ConfigError, when no usable API key can be resolved.
"""

from pathlib import Path

import httpx
from loguru import logger

from ..config import FreesoundConfig, resolve_api_key
from ..errors import ConfigError
from ..models import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    SEARCH_ENDPOINT,
    DownloadRequest,
    SearchRequest,
)

log = logger.bind(component="freesound")


class FreesoundClient:
    """Search and download sounds from Freesound.

    The API key is resolved once here (explicit argument, then
    FREESOUND_API_KEY via FreesoundConfig) and never changes afterwards,
    so one instance can be shared between threads.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        config: FreesoundConfig | None = None,
        timeout: float | None = None,
    ) -> None:
        if config is None:
            config = FreesoundConfig()

        self._api_key = resolve_api_key(api_key, config)
        self._base_url = config.freesound_base_url.rstrip("/") + "/"
        self._timeout = config.freesound_timeout if timeout is None else timeout
        if self._timeout <= 0:
            raise ConfigError(f"Timeout must be positive, got {self._timeout}")

        log.debug(f"FreesoundClient ready: base_url={self._base_url} timeout={self._timeout}")

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def search(
        self,
        query: str,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> str | None:
        """Plain text search. Returns the JSON body on 200, else None."""
        request = SearchRequest(query=query, page=page, page_size=page_size)
        response = self._get(self._base_url + SEARCH_ENDPOINT, request.basic_params())
        if response is None:
            return None

        if response.status_code != 200:
            log.error(
                f"Freesound search failed: status={response.status_code} "
                f"body={response.text}"
            )
            return None
        return response.text

    def advanced_search(
        self,
        query: str,
        filter: str | None = None,
        sort: str | None = None,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
        group_by_pack: bool = False,
        weights: str | None = None,
    ) -> str | None:
        """Text search with filter, sort, pack grouping and field weights.

        filter, sort and weights use the Freesound query grammar and are
        passed through untouched, e.g. filter="duration:[0 TO 30] type:wav",
        sort="num_downloads_desc", weights="tag:4,description:3".
        Always requests DEFAULT_FIELDS. Returns the JSON body on 200, else None.
        """
        request = SearchRequest(
            query=query,
            filter=filter,
            sort=sort,
            page=page,
            page_size=page_size,
            group_by_pack=group_by_pack,
            weights=weights,
        )
        response = self._get(
            self._base_url + SEARCH_ENDPOINT, request.advanced_params()
        )
        if response is None:
            return None

        if response.status_code != 200:
            log.error(
                f"Freesound advanced search failed: status={response.status_code} "
                f"body={response.text}"
            )
            return None
        return response.text

    def download(self, sound_id: int, output_path: str | Path) -> bool:
        """Download the original file of a sound to output_path.

        Overwrites an existing file; parent directories are not created.
        Returns True once the whole body has been written. A file left
        half-written by a failed write is removed.
        """
        request = DownloadRequest(sound_id=sound_id, output_path=Path(output_path))
        response = self._get(
            self._base_url + request.endpoint(), follow_redirects=True
        )
        if response is None:
            return False

        if response.status_code != 200:
            log.error(
                f"Freesound download failed: sound_id={sound_id} "
                f"status={response.status_code}"
            )
            return False

        path = request.output_path
        try:
            out_file = path.open("wb")
        except (OSError, ValueError) as e:
            log.error(f"Cannot open {path} for writing: {e}")
            return False

        try:
            with out_file:
                out_file.write(response.content)
        except OSError as e:
            log.error(f"Writing {path} failed, removing partial file: {e}")
            path.unlink(missing_ok=True)
            return False

        log.debug(f"Downloaded sound {sound_id} to {path} ({len(response.content)} bytes)")
        return True

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Token {self._api_key}",
            "Content-Type": "application/json",
        }

    def _get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        follow_redirects: bool = False,
    ) -> httpx.Response | None:
        """GET with auth and timeout applied. Returns None on transport errors."""
        log.debug(f"GET {url} params={params}")
        try:
            return httpx.get(
                url,
                params=params,
                headers=self._headers(),
                timeout=self._timeout,
                follow_redirects=follow_redirects,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.error(f"Freesound request to {url} failed: {e}")
            return None
