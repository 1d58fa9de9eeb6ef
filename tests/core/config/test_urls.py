import pytest

from ampviewer_core.config.urls import is_valid_url, is_valid_url_with_placeholder


class TestIsValidURL:
    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "https://example.com/relay.html",
            "http://localhost:8080/path?q=1#frag",
            "https://user:pw@example.com:443/a%20b",
            "https://[::1]:8000/",
            "wss://example.com/socket",
            "data:text/html,hello",
            "mailto:someone@example.com",
        ],
    )
    def test_accepts_absolute_urls(self, url):
        assert is_valid_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "example.com",
            "/relative/path",
            "//example.com/no-scheme",
            "https://",
            "https:///path-only",
            "https://example.com:port/",
            "https://example.com:99999/",
            "https://[::1/",
            "https://exa mple.com/",
            "https://example.com/\ttab",
            "https://example.com/?q=%zz",
            "https://example.com/?u=%s",
            "1http://example.com",
        ],
    )
    def test_rejects_malformed_urls(self, url):
        assert is_valid_url(url) is False

    @pytest.mark.parametrize("value", [None, 0, 1, True, b"https://example.com", ["https://example.com"]])
    def test_rejects_non_strings(self, value):
        assert is_valid_url(value) is False


class TestIsValidURLWithPlaceholder:
    def test_accepts_placeholder(self):
        assert is_valid_url_with_placeholder("https://proxy.example.com/?url=%s") is True

    def test_accepts_placeholder_in_path(self):
        assert is_valid_url_with_placeholder("https://proxy.example.com/%s/image") is True

    def test_accepts_plain_url(self):
        assert is_valid_url_with_placeholder("https://proxy.example.com/image") is True

    def test_rejects_multiple_placeholders(self):
        assert is_valid_url_with_placeholder("https://proxy.example.com/%s?u=%s") is False

    def test_placeholder_does_not_make_relative_url_valid(self):
        assert is_valid_url_with_placeholder("/proxy?url=%s") is False

    def test_placeholder_rejected_by_plain_predicate(self):
        assert is_valid_url("https://proxy.example.com/?url=%s") is False

    def test_rejects_non_strings(self):
        assert is_valid_url_with_placeholder(None) is False
        assert is_valid_url_with_placeholder(42) is False
