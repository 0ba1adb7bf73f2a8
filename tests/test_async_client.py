import asyncio
import json

import httpx
import pytest

from lang_translation_lib import (
    AsyncLanguageTranslationClient,
    CreateModelOptions,
    DecodeError,
    InvalidArgumentError,
    NotFoundError,
    ServiceConfig,
    ServiceError,
)
from lang_translation_lib.utils.http import AsyncHttpRequester

from tests.helpers import (
    ENDPOINT,
    IDENTIFY_PAYLOAD,
    MODEL_PAYLOAD,
    TRANSLATION_PAYLOAD,
    RecordingTransport,
)


def _client(config, *responses):
    transport = RecordingTransport(list(responses))
    http_client = httpx.AsyncClient(transport=transport)
    return AsyncLanguageTranslationClient(config, client=http_client), transport


class TestAsyncClient:
    @pytest.mark.asyncio
    async def test_list_models_query(self, config):
        client, transport = _client(config, (200, {"models": [MODEL_PAYLOAD]}))
        async with client:
            models = await client.list_models(show_default=True, source="", target="en")

        request = transport.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/api/v2/models"
        assert str(request.url.params) == "default=true&target=en"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Authorization"].startswith("Basic ")
        assert models.models[0].model_id == "en-es"

    @pytest.mark.asyncio
    async def test_translate_with_model(self, config):
        client, transport = _client(config, (200, TRANSLATION_PAYLOAD))
        async with client:
            result = await client.translate(
                "Hello world", model_id="m1", source="en", target="fr"
            )

        request = transport.requests[0]
        assert request.url == httpx.URL(f"{ENDPOINT}/v2/translate")
        assert json.loads(request.read()) == {"text": "Hello world", "model_id": "m1"}
        assert result.character_count == 11

    @pytest.mark.asyncio
    async def test_identify_raw_text(self, config):
        client, transport = _client(config, (200, IDENTIFY_PAYLOAD))
        async with client:
            languages = await client.identify("Bonjour")

        request = transport.requests[0]
        assert request.read() == b"Bonjour"
        assert request.headers["Content-Type"].startswith("text/plain")
        assert [lang.language_code for lang in languages] == ["fr", "ca", "it"]

    @pytest.mark.asyncio
    async def test_create_model_sends_multipart(self, config):
        client, transport = _client(config, (200, MODEL_PAYLOAD))
        async with client:
            await client.create_model(
                CreateModelOptions(base_model_id="en-es", parallel_corpus=b"<tmx/>")
            )

        request = transport.requests[0]
        body = request.read()
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        assert b'name="body_part"' in body
        assert b'name="parallel_corpus"; filename="parallel_corpus.tmx"' in body
        assert b'name="name"' not in body

    @pytest.mark.asyncio
    async def test_delete_model_validation_sends_nothing(self, config):
        client, transport = _client(config)
        async with client:
            with pytest.raises(InvalidArgumentError):
                await client.delete_model("")
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_service_error(self, config):
        client, _ = _client(config, (404, {"error": "model not found"}))
        async with client:
            with pytest.raises(NotFoundError) as exc_info:
                await client.get_model("missing")
        assert exc_info.value.message == "model not found"

    @pytest.mark.asyncio
    async def test_decode_error(self, config):
        client, _ = _client(config, (200, b"not json"))
        async with client:
            with pytest.raises(DecodeError):
                await client.list_identifiable_languages()

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self, config):
        routes = {
            "/api/v2/translate": TRANSLATION_PAYLOAD,
            "/api/v2/identify": IDENTIFY_PAYLOAD,
            "/api/v2/models": {"models": []},
        }
        seen = []

        def handler(request):
            seen.append(request.url.path)
            return httpx.Response(200, json=routes[request.url.path])

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        async with AsyncLanguageTranslationClient(config, client=http_client) as client:
            translated, languages, models = await asyncio.gather(
                client.translate("Hello world", source="en", target="es"),
                client.identify("Bonjour"),
                client.list_models(),
            )
        assert sorted(seen) == sorted(routes)
        assert translated.translations[0].translation_output == "Hola mundo"
        assert languages[0].language_code == "fr"
        assert models.models == []

    @pytest.mark.asyncio
    async def test_bearer_token(self):
        config = ServiceConfig(endpoint_url=ENDPOINT, token="abc")
        client, transport = _client(config, (200, {"models": []}))
        async with client:
            await client.list_models()
        assert transport.requests[0].headers["Authorization"] == "Bearer abc"


class TestAsyncTransport:
    @pytest.mark.asyncio
    async def test_connect_error_propagates_unchanged(self, config):
        client, transport = _client(config, httpx.ConnectError)
        async with client:
            with pytest.raises(httpx.ConnectError):
                await client.list_models()
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_server_error_is_not_retried(self, config):
        client, transport = _client(
            config, (503, {"error": "unavailable"}), (200, {"models": []})
        )
        async with client:
            with pytest.raises(ServiceError) as exc_info:
                await client.list_models()
        assert exc_info.value.status_code == 503
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_closed_injected_client_is_not_replaced(self, config):
        client, transport = _client(config, (200, {"models": []}))
        async with client:
            pass
        with pytest.raises(RuntimeError):
            await client.list_models()
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_owned_client_is_recreated_after_close(self, config):
        requester = AsyncHttpRequester(config)
        first = requester._get_client()
        await requester.aclose()

        second = requester._get_client()
        assert second is not first
        assert not second.is_closed
        await requester.aclose()
