"""Tests for the advisor HTTP client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from rollout.core.config import Settings
from rollout.services.brain_client import BrainClient, extract_answer


@pytest.fixture
def brain():
    return BrainClient("http://brain.test/", query_timeout=15.0, health_timeout=1.5, log_timeout=1.0)


def _patched_client(method: str, response=None, error=None):
    patcher = patch("httpx.AsyncClient")
    MockClient = patcher.start()
    client_instance = AsyncMock()
    if error is not None:
        getattr(client_instance, method).side_effect = error
    else:
        getattr(client_instance, method).return_value = response
    MockClient.return_value.__aenter__ = AsyncMock(return_value=client_instance)
    MockClient.return_value.__aexit__ = AsyncMock(return_value=None)
    return patcher, MockClient, client_instance


class TestExtractAnswer:
    @pytest.mark.parametrize("key", ["response", "answer", "message", "text", "output"])
    def test_known_fields(self, key):
        assert extract_answer({key: "hello"}) == "hello"

    def test_priority_order(self):
        assert extract_answer({"message": "second", "answer": "first"}) == "first"

    def test_empty_field_skipped(self):
        assert extract_answer({"response": "", "answer": "fallback"}) == "fallback"

    def test_unrecognized_shape_serialized(self):
        assert extract_answer({"result": 1}) == '{"result": 1}'

    def test_plain_text(self):
        assert extract_answer("raw answer") == "raw answer"


def test_url_joins_without_double_slash(brain):
    assert brain.url("query") == "http://brain.test/query"
    assert brain.url("/health") == "http://brain.test/health"


def test_from_settings():
    settings = Settings(BRAIN_URL="http://10.0.0.5:8088", BRAIN_QUERY_TIMEOUT=20.0, BRAIN_HEALTH_TIMEOUT=0.5)

    brain = BrainClient.from_settings(settings)

    assert brain.base_url == "http://10.0.0.5:8088"
    assert brain.query_timeout == 20.0
    assert brain.health_timeout == 0.5
    assert brain.log_timeout == settings.BRAIN_LOG_TIMEOUT


class TestCalls:
    @pytest.mark.asyncio
    async def test_query_uses_long_timeout(self, brain):
        mock_response = MagicMock(status_code=200)
        patcher, MockClient, client_instance = _patched_client("post", response=mock_response)
        try:
            result = await brain.query({"need": "hi"})
        finally:
            patcher.stop()

        assert result is mock_response
        MockClient.assert_called_once_with(timeout=15.0)
        client_instance.post.assert_awaited_once_with("http://brain.test/query", json={"need": "hi"})

    @pytest.mark.asyncio
    async def test_health_uses_short_timeout(self, brain):
        patcher, MockClient, client_instance = _patched_client("get", response=MagicMock(status_code=200))
        try:
            await brain.health()
        finally:
            patcher.stop()

        MockClient.assert_called_once_with(timeout=1.5)
        client_instance.get.assert_awaited_once_with("http://brain.test/health")

    @pytest.mark.asyncio
    async def test_log_use_posts_payload(self, brain):
        patcher, MockClient, client_instance = _patched_client("post", response=MagicMock(status_code=202))
        try:
            await brain.log_use({"event": "opened"})
        finally:
            patcher.stop()

        MockClient.assert_called_once_with(timeout=1.0)
        client_instance.post.assert_awaited_once_with("http://brain.test/log_use", json={"event": "opened"})

    @pytest.mark.asyncio
    async def test_timeout_propagates(self, brain):
        patcher, _, _ = _patched_client("post", error=httpx.ReadTimeout("timed out"))
        try:
            with pytest.raises(httpx.TimeoutException):
                await brain.query({"need": "hi"})
        finally:
            patcher.stop()
