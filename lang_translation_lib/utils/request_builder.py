"""
Pure request builders, one per logical service operation.

Each builder validates its required arguments (raising
:class:`InvalidArgumentError` before anything is sent), assembles the query
parameters or body from a filtered list of ``(key, value)`` pairs and returns
an :class:`ApiRequest`.  No builder performs I/O.
"""

from typing import Any, Mapping, Optional
from urllib.parse import quote

from lang_translation_lib.data_models.api_request import ApiRequest, CreateModelOptions
from lang_translation_lib.data_models.constants import (
    BODY_PART_PARAM,
    DEFAULT_PARAM,
    FORCED_GLOSSARY_PARAM,
    IDENTIFIABLE_LANGUAGES_PATH,
    IDENTIFY_PATH,
    MODEL_ID_PARAM,
    MODEL_PATH,
    MODELS_PATH,
    MONOLINGUAL_CORPUS_PARAM,
    NAME_PARAM,
    PARALLEL_CORPUS_PARAM,
    SOURCE_PARAM,
    TARGET_PARAM,
    TEXT_PARAM,
    TRANSLATE_PATH,
    UPLOAD_FILES,
)
from lang_translation_lib.utils.validation import (
    drop_empty,
    encode_query_value,
    not_empty,
)


def _model_path(model_id: str) -> str:
    return MODEL_PATH.format(model_id=quote(model_id, safe=""))


def build_models_list_request(
    show_default: Optional[bool] = None,
    source: Optional[str] = None,
    target: Optional[str] = None,
    extra_params: Optional[Mapping[str, Any]] = None,
) -> ApiRequest:
    """
    GET the models collection, filtered by the non‑empty arguments.

    ``show_default`` maps to the ``default`` query parameter; empty strings
    and ``None`` values are left out of the query string entirely.
    """
    pairs = [
        (DEFAULT_PARAM, show_default),
        (SOURCE_PARAM, source),
        (TARGET_PARAM, target),
    ]
    pairs += list((extra_params or {}).items())
    params = [(key, encode_query_value(value)) for key, value in drop_empty(pairs)]
    return ApiRequest(method="GET", path=MODELS_PATH, params=params)


def build_model_request(model_id: str) -> ApiRequest:
    not_empty(model_id, "Model ID cannot be empty")
    return ApiRequest(method="GET", path=_model_path(model_id))


def build_create_model_request(options: CreateModelOptions) -> ApiRequest:
    """
    POST a multi‑part form creating a custom model.

    The base model id always travels as the ``body_part`` field.  The display
    name and each training file are appended only when present, always in the
    order ``name``, ``forced_glossary``, ``parallel_corpus``,
    ``monolingual_corpus``.
    """
    not_empty(options.base_model_id, "Base model ID cannot be empty")

    text_parts = drop_empty(
        [
            (BODY_PART_PARAM, options.base_model_id),
            (NAME_PARAM, options.name),
        ]
    )
    file_parts = drop_empty(
        [
            (FORCED_GLOSSARY_PARAM, options.forced_glossary),
            (PARALLEL_CORPUS_PARAM, options.parallel_corpus),
            (MONOLINGUAL_CORPUS_PARAM, options.monolingual_corpus),
        ]
    )

    parts = [(key, (None, value.encode("utf-8"), None)) for key, value in text_parts]
    for key, payload in file_parts:
        filename, content_type = UPLOAD_FILES[key]
        parts.append((key, (filename, payload, content_type)))
    return ApiRequest(method="POST", path=MODELS_PATH, parts=parts)


def build_delete_model_request(model_id: str) -> ApiRequest:
    not_empty(model_id, "Model ID cannot be empty")
    return ApiRequest(method="DELETE", path=_model_path(model_id))


def build_identifiable_languages_request() -> ApiRequest:
    return ApiRequest(method="GET", path=IDENTIFIABLE_LANGUAGES_PATH)


def build_identify_request(text: str) -> ApiRequest:
    not_empty(text, "Text cannot be empty")
    return ApiRequest(
        method="POST",
        path=IDENTIFY_PATH,
        headers={"Content-Type": "text/plain; charset=utf-8"},
        content=text,
    )


def build_translate_request(
    text: str,
    model_id: Optional[str] = None,
    source: Optional[str] = None,
    target: Optional[str] = None,
) -> ApiRequest:
    """
    POST a JSON translation request.

    Keys whose value is empty or ``None`` are omitted.  The builder encodes
    whatever it receives; choosing between ``model_id`` and ``source`` /
    ``target`` is left to the caller.
    """
    not_empty(text, "Text cannot be empty")
    body = dict(
        drop_empty(
            [
                (TEXT_PARAM, text),
                (MODEL_ID_PARAM, model_id),
                (SOURCE_PARAM, source),
                (TARGET_PARAM, target),
            ]
        )
    )
    return ApiRequest(method="POST", path=TRANSLATE_PATH, json_body=body)
