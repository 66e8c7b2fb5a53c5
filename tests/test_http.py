"""Tests for the shared HTTP client."""

from __future__ import annotations

from unittest.mock import patch

import requests
from urllib3.util.retry import Retry

from daycast import __version__
from daycast.services.http import DEFAULT_TIMEOUT, NO_RETRY, create_session, session


class TestNoRetry:
    """Verify the default strategy does not retry."""

    def test_total_retries(self) -> None:
        assert NO_RETRY.total == 0

    def test_status_not_raised(self) -> None:
        assert NO_RETRY.raise_on_status is False


class TestCreateSession:
    """Verify session factory."""

    def test_returns_session(self) -> None:
        s = create_session()
        assert isinstance(s, requests.Session)

    def test_mounts_https_adapter(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://example.com")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)

    def test_mounts_http_adapter(self) -> None:
        s = create_session()
        adapter = s.get_adapter("http://example.com")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)

    def test_adapter_has_no_retry(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 0

    def test_custom_retry(self) -> None:
        custom = Retry(total=3, backoff_factor=1)
        s = create_session(retry=custom)
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 3

    def test_user_agent_header(self) -> None:
        s = create_session()
        assert s.headers["User-Agent"] == f"daycast/{__version__}"

    def test_custom_user_agent(self) -> None:
        s = create_session(user_agent="tests/1.0")
        assert s.headers["User-Agent"] == "tests/1.0"

    def test_default_timeout_injected(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_explicit_timeout_not_overridden(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep, timeout=99)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 99

    def test_timeout_applied_through_get(self) -> None:
        s = create_session(timeout=42)
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.get("https://example.com")
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_get_timeout_wins(self) -> None:
        s = create_session(timeout=42)
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.get("https://example.com", timeout=5)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 5


class TestModuleSession:
    """Verify the module-level singleton."""

    def test_session_is_configured(self) -> None:
        adapter = session.get_adapter("https://example.com")
        assert adapter.max_retries.total == 0

    def test_default_timeout(self) -> None:
        assert DEFAULT_TIMEOUT == 30
