from lang_translation_lib.async_client import AsyncLanguageTranslationClient
from lang_translation_lib.client import LanguageTranslationClient
from lang_translation_lib.config import ServiceConfig
from lang_translation_lib.data_models.api_request import CreateModelOptions
from lang_translation_lib.data_models.translation import (
    DeletionStatus,
    IdentifiableLanguage,
    IdentifiedLanguage,
    LanguageModel,
    LanguageModels,
    Translation,
    TranslationResult,
)
from lang_translation_lib.exceptions import (
    LanguageTranslationError,
    InvalidArgumentError,
    ServiceError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    DecodeError,
)

__all__ = [
    "LanguageTranslationClient",
    "AsyncLanguageTranslationClient",
    "ServiceConfig",
    "CreateModelOptions",
    "DeletionStatus",
    "IdentifiableLanguage",
    "IdentifiedLanguage",
    "LanguageModel",
    "LanguageModels",
    "Translation",
    "TranslationResult",
    "LanguageTranslationError",
    "InvalidArgumentError",
    "ServiceError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "DecodeError",
]
