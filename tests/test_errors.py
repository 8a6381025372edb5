"""Tests for errors.py -- exception hierarchy."""

from freesound_downloader.errors import ConfigError, FreesoundError


class TestExceptionHierarchy:
    def test_config_error_inherits_from_freesound_error(self):
        assert issubclass(ConfigError, FreesoundError)

    def test_freesound_error_is_exception(self):
        assert issubclass(FreesoundError, Exception)

    def test_message_preserved(self):
        err = ConfigError("no credential")
        assert "no credential" in str(err)
