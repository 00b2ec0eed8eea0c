"""Tests for library settings."""

from polydice.config import Settings, get_settings


class TestSettings:
    """Tests for Settings and get_settings."""

    def test_default_seed_is_none(self):
        """Test sources are unseeded by default."""
        assert Settings().seed is None

    def test_seed_from_environment(self, monkeypatch):
        """Test POLYDICE_SEED is read as an integer."""
        monkeypatch.setenv("POLYDICE_SEED", "1234")
        assert Settings().seed == 1234

    def test_get_settings_is_cached(self):
        """Test get_settings returns the same instance until cleared."""
        first = get_settings()
        assert get_settings() is first
        get_settings.cache_clear()
        assert get_settings() is not first
