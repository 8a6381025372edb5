"""Tests for models.py -- constants and request parameter building."""

from pathlib import Path

from freesound_downloader.models import (
    BASE_URL,
    DEFAULT_FIELDS,
    DownloadRequest,
    SearchRequest,
)


class TestConstants:
    def test_base_url(self):
        assert BASE_URL == "https://freesound.org/apiv2/"

    def test_default_fields(self):
        assert DEFAULT_FIELDS.split(",") == [
            "id", "name", "username", "description", "tags",
            "preview-hq-mp3", "duration",
        ]


class TestSearchRequest:
    def test_defaults(self):
        request = SearchRequest(query="rain")
        assert request.page == 1
        assert request.page_size == 15
        assert request.group_by_pack is False
        assert request.filter is None
        assert request.sort is None
        assert request.weights is None

    def test_basic_params(self):
        request = SearchRequest(query="rain", page=3, page_size=50)
        assert request.basic_params() == {
            "query": "rain",
            "page": "3",
            "page_size": "50",
        }

    def test_basic_params_ignore_advanced_options(self):
        request = SearchRequest(query="rain", filter="type:wav", group_by_pack=True)
        params = request.basic_params()
        assert "filter" not in params
        assert "group_by_pack" not in params
        assert "fields" not in params

    def test_advanced_params_minimal(self):
        params = SearchRequest(query="rain").advanced_params()
        assert params == {
            "query": "rain",
            "page": "1",
            "page_size": "15",
            "fields": DEFAULT_FIELDS,
            "group_by_pack": "0",
        }

    def test_advanced_params_full(self):
        request = SearchRequest(
            query="guitar",
            filter="type:wav duration:[10 TO 60]",
            sort="num_downloads_desc",
            page=2,
            page_size=20,
            group_by_pack=True,
            weights="tag:4,description:3",
        )
        params = request.advanced_params()
        assert params["filter"] == "type:wav duration:[10 TO 60]"
        assert params["sort"] == "num_downloads_desc"
        assert params["group_by_pack"] == "1"
        assert params["weights"] == "tag:4,description:3"

    def test_empty_filter_is_still_sent(self):
        # Only None means "not given"
        params = SearchRequest(query="rain", filter="").advanced_params()
        assert params["filter"] == ""


class TestDownloadRequest:
    def test_endpoint(self):
        request = DownloadRequest(sound_id=1234, output_path=Path("out.wav"))
        assert request.endpoint() == "sounds/1234/download/"
