# libretranslator/services/translation_client.py
"""
Client for a DeepL-compatible translation endpoint (DeepLX style).

Request:  POST {api_url}/v2/translate
          {"text": ..., "target_lang": ..., "source_lang": ...?}
Response: {"code": 200, "data": "<translated text>"}

`code == 200` in the body is the only success signal. The HTTP status is
not trusted on its own: error bodies are parsed like success bodies.
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from typing import Optional

from libretranslator.config.settings import AppSettings
from libretranslator.models.types import AUTO_DETECT
from libretranslator.services.exceptions import ApplicationError, TransportError

logger = logging.getLogger(__name__)

TRANSLATE_PATH = "/v2/translate"
SUCCESS_CODE = 200


def build_payload(text: str, target_lang: str, source_lang: str = AUTO_DETECT) -> dict[str, str]:
    """Assemble the request body.

    source_lang is omitted for the auto-detect sentinel so the endpoint
    infers it.
    """
    payload = {
        "text": text,
        "target_lang": target_lang,
    }
    if source_lang != AUTO_DETECT:
        payload["source_lang"] = source_lang
    return payload


def parse_response(raw: bytes) -> str:
    """Extract the translated text from a response body.

    Raises:
        TransportError: body is not JSON or has no string `data`
        ApplicationError: `code` is anything other than 200
    """
    try:
        body = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise TransportError(f"Malformed response from translation endpoint: {e}") from e

    if not isinstance(body, dict):
        raise TransportError("Malformed response from translation endpoint (not an object)")

    code = body.get("code")
    if code != SUCCESS_CODE:
        raise ApplicationError(code if isinstance(code, int) else None)

    data = body.get("data")
    if not isinstance(data, str):
        raise TransportError("Malformed response from translation endpoint (data is missing)")
    return data


class TranslationClient:
    """Blocking HTTP client; call it from a worker thread."""

    def __init__(self, settings: AppSettings) -> None:
        self._settings = settings

    @property
    def url(self) -> str:
        return f"{self._settings.api_url}{TRANSLATE_PATH}"

    def translate(self, text: str, target_lang: str, source_lang: str = AUTO_DETECT) -> str:
        payload = build_payload(text, target_lang, source_lang)
        body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        headers = {
            "Authorization": self._settings.api_authorization,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        logger.debug(
            "POST %s (chars=%d, source=%s, target=%s)",
            self.url, len(text), payload.get("source_lang", AUTO_DETECT), target_lang,
        )
        raw = self._send(body, headers)
        return parse_response(raw)

    def _send(self, body: bytes, headers: dict[str, str]) -> bytes:
        url = self.url
        try:
            req = urllib.request.Request(url, data=body, headers=headers, method="POST")
            with urllib.request.urlopen(req, timeout=self._settings.request_timeout) as resp:
                return resp.read()
        except urllib.error.HTTPError as e:
            # Error statuses usually still carry {"code": ..., "message": ...}
            error_body: Optional[bytes] = None
            try:
                error_body = e.read()
            except OSError:
                error_body = None
            if error_body:
                logger.debug("Endpoint answered HTTP %d, parsing body", e.code)
                return error_body
            raise TransportError(f"HTTP {e.code} from translation endpoint") from e
        except urllib.error.URLError as e:
            raise TransportError(f"Cannot reach translation endpoint: {e.reason}") from e
        except (TimeoutError, OSError) as e:
            raise TransportError(f"Translation request failed: {e}") from e
        except ValueError as e:
            # urllib rejects malformed URLs (e.g. empty api_url) with ValueError
            raise TransportError(f"Invalid translation endpoint URL {url!r}: {e}") from e
