"""
Wire‑level names shared by the request builders.

The remote service expects these exact snake_case keys, both in query strings
and in JSON / multi‑part bodies.
"""

MODEL_ID_PARAM = "model_id"
SOURCE_PARAM = "source"
TARGET_PARAM = "target"
TEXT_PARAM = "text"
NAME_PARAM = "name"
PARALLEL_CORPUS_PARAM = "parallel_corpus"
MONOLINGUAL_CORPUS_PARAM = "monolingual_corpus"
FORCED_GLOSSARY_PARAM = "forced_glossary"
BODY_PART_PARAM = "body_part"
DEFAULT_PARAM = "default"

# Endpoint paths, relative to the configured service url
MODELS_PATH = "/v2/models"
MODEL_PATH = "/v2/models/{model_id}"
IDENTIFY_PATH = "/v2/identify"
TRANSLATE_PATH = "/v2/translate"
IDENTIFIABLE_LANGUAGES_PATH = "/v2/identifiable_languages"

# Error body keys inspected (in order) when building ``ServiceError.message``
ERROR_MESSAGE_KEYS = ["error", "error_message", "message", "description"]

# Multi‑part file names and content types of the training artifacts
UPLOAD_FILES = {
    FORCED_GLOSSARY_PARAM: ("forced_glossary.tmx", "application/octet-stream"),
    PARALLEL_CORPUS_PARAM: ("parallel_corpus.tmx", "application/octet-stream"),
    MONOLINGUAL_CORPUS_PARAM: ("monolingual_corpus.txt", "text/plain"),
}
