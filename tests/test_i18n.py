"""Tests for i18n (internationalization) module."""

from src.utils.i18n import available_languages, current_language, init_language, tr


class TestI18n:
    """Test the tr() translation function."""

    def test_tr_returns_key_for_english(self):
        init_language("en")
        assert tr("&File") == "&File"
        assert tr("Video Not Available") == "Video Not Available"

    def test_tr_returns_korean(self):
        init_language("ko")
        assert tr("&File") == "파일(&F)"
        assert tr("Pause") == "일시정지"
        init_language("en")

    def test_tr_fallback_for_missing_key(self):
        init_language("ko")
        assert tr("nonexistent_key_xyz_12345") == "nonexistent_key_xyz_12345"
        init_language("en")

    def test_unknown_language_falls_back(self):
        assert init_language("xx") == "en"
        assert current_language() == "en"
        assert tr("&File") == "&File"

    def test_code_normalized(self):
        assert init_language(" KO ") == "ko"
        init_language("en")

    def test_empty_code_is_english(self):
        assert init_language("") == "en"

    def test_available_languages(self):
        langs = available_languages()
        assert langs[0] == "en"
        assert "ko" in langs

    def test_ko_coverage_player(self):
        """Verify player strings have Korean translations."""
        init_language("ko")
        for key in ("Play", "Mute", "Unmute", "Playback Speed", "Normal", "Fullscreen", "Exit Fullscreen"):
            assert tr(key) != key
        init_language("en")
