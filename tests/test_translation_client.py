# tests/test_translation_client.py
"""Tests for libretranslator.services.translation_client"""

import io
import json
import urllib.error
from unittest.mock import MagicMock, patch

import pytest

from libretranslator.config.settings import AppSettings
from libretranslator.services.exceptions import ApplicationError, TransportError
from libretranslator.services.translation_client import (
    TranslationClient,
    build_payload,
    parse_response,
)


def _response(body: bytes) -> MagicMock:
    resp = MagicMock()
    resp.read.return_value = body
    resp.__enter__.return_value = resp
    resp.__exit__.return_value = False
    return resp


@pytest.fixture
def settings():
    return AppSettings(api_url="https://deeplx.test", api_authorization="Bearer abc", request_timeout=5)


class TestBuildPayload:
    """Tests for build_payload()"""

    def test_auto_detect_omits_source_lang(self):
        assert build_payload("Hello", "ZH") == {"text": "Hello", "target_lang": "ZH"}
        assert build_payload("Hello", "ZH", "AUTO") == {"text": "Hello", "target_lang": "ZH"}

    def test_explicit_source_lang(self):
        assert build_payload("Hallo", "EN", "DE") == {
            "text": "Hallo",
            "target_lang": "EN",
            "source_lang": "DE",
        }


class TestParseResponse:
    """Tests for parse_response()"""

    def test_success(self):
        raw = json.dumps({"code": 200, "data": "你好"}).encode("utf-8")
        assert parse_response(raw) == "你好"

    def test_application_error(self):
        with pytest.raises(ApplicationError) as exc_info:
            parse_response(b'{"code": 500}')
        assert exc_info.value.code == 500

    def test_missing_code_is_application_error(self):
        with pytest.raises(ApplicationError) as exc_info:
            parse_response(b'{"data": "x"}')
        assert exc_info.value.code is None

    def test_string_code_is_not_success(self):
        with pytest.raises(ApplicationError):
            parse_response(b'{"code": "200", "data": "x"}')

    def test_invalid_json_is_transport_error(self):
        with pytest.raises(TransportError):
            parse_response(b"<html>Bad Gateway</html>")

    def test_non_object_is_transport_error(self):
        with pytest.raises(TransportError):
            parse_response(b"[1, 2]")

    def test_missing_data_is_transport_error(self):
        with pytest.raises(TransportError):
            parse_response(b'{"code": 200}')


class TestTranslationClient:
    """Tests for TranslationClient.translate()"""

    def test_url(self, settings):
        assert TranslationClient(settings).url == "https://deeplx.test/v2/translate"

    def test_request_construction(self, settings):
        client = TranslationClient(settings)
        body = json.dumps({"code": 200, "data": "Hallo"}).encode("utf-8")
        with patch("urllib.request.urlopen", return_value=_response(body)) as mock_urlopen:
            result = client.translate("Hello", "DE", "EN")

        assert result == "Hallo"
        req = mock_urlopen.call_args.args[0]
        assert req.full_url == "https://deeplx.test/v2/translate"
        assert req.get_method() == "POST"
        assert req.get_header("Authorization") == "Bearer abc"
        assert req.get_header("Content-type") == "application/json"
        assert json.loads(req.data.decode("utf-8")) == {
            "text": "Hello",
            "target_lang": "DE",
            "source_lang": "EN",
        }
        assert mock_urlopen.call_args.kwargs["timeout"] == 5

    def test_http_error_body_is_parsed(self, settings):
        client = TranslationClient(settings)
        error = urllib.error.HTTPError(
            "https://deeplx.test/v2/translate", 503, "Service Unavailable", {},
            io.BytesIO(b'{"code": 503, "message": "busy"}'),
        )
        with patch("urllib.request.urlopen", side_effect=error):
            with pytest.raises(ApplicationError) as exc_info:
                client.translate("Hello", "ZH")
        assert exc_info.value.code == 503

    def test_http_error_without_body(self, settings):
        client = TranslationClient(settings)
        error = urllib.error.HTTPError("https://deeplx.test/v2/translate", 502, "Bad Gateway", {}, io.BytesIO(b""))
        with patch("urllib.request.urlopen", side_effect=error):
            with pytest.raises(TransportError):
                client.translate("Hello", "ZH")

    def test_network_error(self, settings):
        client = TranslationClient(settings)
        with patch("urllib.request.urlopen", side_effect=urllib.error.URLError("connection refused")):
            with pytest.raises(TransportError):
                client.translate("Hello", "ZH")

    def test_timeout(self, settings):
        client = TranslationClient(settings)
        with patch("urllib.request.urlopen", side_effect=TimeoutError("timed out")):
            with pytest.raises(TransportError):
                client.translate("Hello", "ZH")

    def test_unconfigured_url(self):
        client = TranslationClient(AppSettings(api_url=""))
        with pytest.raises(TransportError):
            client.translate("Hello", "ZH")
