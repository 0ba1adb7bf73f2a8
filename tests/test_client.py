import logging

import pytest
import requests

from lang_translation_lib import (
    CreateModelOptions,
    InvalidArgumentError,
    LanguageTranslationClient,
    NotFoundError,
    ServiceError,
)

from tests.helpers import (
    ENDPOINT,
    IDENTIFY_PAYLOAD,
    MODEL_PAYLOAD,
    TRANSLATION_PAYLOAD,
    FakeSession,
)


def _client(config, *responses):
    session = FakeSession(list(responses))
    return LanguageTranslationClient(config, session=session), session


class TestSessionSetup:
    def test_basic_auth_and_accept_header_per_request(self, config):
        client, session = _client(config, (200, {"models": []}))
        client.list_models()

        kwargs = session.calls[0][2]
        assert kwargs["auth"] == ("user", "secret")
        assert kwargs["headers"]["Accept"] == "application/json"
        assert kwargs["timeout"] == config.timeout

    def test_injected_session_is_not_modified(self, config):
        session = FakeSession([(200, {"models": []})])
        headers_before = dict(session.headers)
        LanguageTranslationClient(config, session=session).list_models()

        assert session.auth is None
        assert dict(session.headers) == headers_before

    def test_bearer_token_header(self, config):
        token_config = config.model_copy(update={"token": "abc"})
        client, session = _client(token_config, (200, {"models": []}))
        client.list_models()

        kwargs = session.calls[0][2]
        assert kwargs["headers"]["Authorization"] == "Bearer abc"
        assert "auth" not in kwargs

    def test_usable_as_context_manager(self, config):
        with LanguageTranslationClient(config, session=FakeSession([])) as client:
            assert client.config is config


class TestModels:
    def test_list_models_filters(self, config):
        client, session = _client(config, (200, {"models": [MODEL_PAYLOAD]}))
        models = client.list_models(show_default=True, source="", target="en")

        method, url, kwargs = session.calls[0]
        assert method == "GET"
        assert url == f"{ENDPOINT}/v2/models"
        assert kwargs["params"] == [("default", "true"), ("target", "en")]
        assert models.models[0].model_id == "en-es"

    def test_get_model(self, config):
        client, session = _client(config, (200, MODEL_PAYLOAD))
        model = client.get_model("en-es")
        assert session.calls[0][1] == f"{ENDPOINT}/v2/models/en-es"
        assert model.source == "en"

    def test_create_model_multipart(self, config):
        created = {**MODEL_PAYLOAD, "model_id": "custom-1", "status": "training"}
        client, session = _client(config, (200, created))
        model = client.create_model(
            CreateModelOptions(
                base_model_id="en-es", name="custom", forced_glossary=b"<tmx/>"
            )
        )

        method, url, kwargs = session.calls[0]
        assert method == "POST"
        assert [name for name, _ in kwargs["files"]] == [
            "body_part",
            "name",
            "forced_glossary",
        ]
        assert model.model_id == "custom-1"
        assert model.status == "training"

    def test_create_model_from_dict(self, config):
        client, session = _client(config, (200, MODEL_PAYLOAD))
        client.create_model({"base_model_id": "en-es"})
        assert session.calls[0][2]["files"] == [("body_part", (None, b"en-es", None))]

    @pytest.mark.parametrize("options", [None, {}, {"base_model_id": ""}])
    def test_create_model_requires_base_model(self, config, options):
        client, session = _client(config)
        with pytest.raises(InvalidArgumentError):
            client.create_model(options)
        assert session.calls == []

    @pytest.mark.parametrize("model_id", ["", None])
    def test_delete_model_validates_before_sending(self, config, model_id):
        client, session = _client(config)
        with pytest.raises(InvalidArgumentError):
            client.delete_model(model_id)
        assert session.calls == []

    def test_delete_model_empty_body_acknowledged(self, config):
        client, session = _client(config, (200, b""))
        status = client.delete_model("custom-1")
        assert session.calls[0][0] == "DELETE"
        assert status.status == "OK"

    def test_delete_unknown_model(self, config):
        client, _ = _client(config, (404, {"error": "model not found"}))
        with pytest.raises(NotFoundError) as exc_info:
            client.delete_model("missing")
        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "model not found"


class TestLanguages:
    def test_identify(self, config):
        client, session = _client(config, (200, IDENTIFY_PAYLOAD))
        languages = client.identify("Bonjour")

        method, url, kwargs = session.calls[0]
        assert (method, url) == ("POST", f"{ENDPOINT}/v2/identify")
        assert kwargs["data"] == b"Bonjour"
        assert languages[0].language_code == "fr"
        assert [lang.confidence for lang in languages] == [0.92, 0.05, 0.01]

    def test_identify_empty_text(self, config):
        client, session = _client(config)
        with pytest.raises(InvalidArgumentError):
            client.identify("")
        assert session.calls == []

    def test_identifiable_languages(self, config):
        payload = {"languages": [{"language": "af", "name": "Afrikaans"}]}
        client, _ = _client(config, (200, payload))
        languages = client.list_identifiable_languages()
        assert languages[0].name == "Afrikaans"
        assert languages[0].language_code == "af"


class TestTranslate:
    def test_model_takes_precedence(self, config):
        client, session = _client(config, (200, TRANSLATION_PAYLOAD))
        result = client.translate("Hello world", model_id="m1", source="en", target="fr")

        assert session.calls[0][2]["json"] == {"text": "Hello world", "model_id": "m1"}
        assert result.word_count == 2
        assert result.translations[0].translation_output == "Hola mundo"

    def test_language_pair(self, config):
        client, session = _client(config, (200, TRANSLATION_PAYLOAD))
        client.translate("Hello world", source="en", target="es")
        assert session.calls[0][2]["json"] == {
            "text": "Hello world",
            "source": "en",
            "target": "es",
        }

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"model_id": ""},
            {"source": "en"},
            {"target": "es"},
            {"source": "", "target": "es"},
        ],
    )
    def test_missing_model_or_pair(self, config, kwargs):
        client, session = _client(config)
        with pytest.raises(InvalidArgumentError):
            client.translate("Hello", **kwargs)
        assert session.calls == []

    def test_empty_text(self, config):
        client, _ = _client(config)
        with pytest.raises(InvalidArgumentError):
            client.translate("", model_id="m1")

    def test_service_error_is_propagated(self, config):
        client, _ = _client(config, (400, {"error_message": "unsupported pair"}))
        with pytest.raises(ServiceError) as exc_info:
            client.translate("Hello", source="en", target="xx")
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "unsupported pair"


class TestTransportFailures:
    def test_connection_error_propagates_unchanged(self, config):
        client, session = _client(config, requests.ConnectionError("connection refused"))
        with pytest.raises(requests.ConnectionError):
            client.list_models()
        assert len(session.calls) == 1

    def test_server_error_is_not_retried(self, config):
        client, session = _client(
            config, (503, {"error": "unavailable"}), (200, {"models": []})
        )
        with pytest.raises(ServiceError) as exc_info:
            client.list_models()
        assert exc_info.value.status_code == 503
        assert len(session.calls) == 1

    def test_service_error_is_logged_as_warning(self, config, caplog):
        client, _ = _client(config, (404, {"error": "model not found"}))
        with caplog.at_level(logging.WARNING):
            with pytest.raises(NotFoundError):
                client.get_model("missing")

        records = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(records) == 1
        assert "GET /v2/models/missing failed with status 404" in records[0].getMessage()
        assert "model not found" in records[0].getMessage()
