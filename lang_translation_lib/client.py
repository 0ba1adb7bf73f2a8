import logging
from typing import Any, Dict, List, Optional, Union

import requests

from lang_translation_lib.config import ServiceConfig
from lang_translation_lib.data_models.api_request import CreateModelOptions
from lang_translation_lib.data_models.translation import (
    DeletionStatus,
    IdentifiableLanguage,
    IdentifiedLanguage,
    LanguageModel,
    LanguageModels,
    TranslationResult,
)
from lang_translation_lib.exceptions import InvalidArgumentError
from lang_translation_lib.services.languages import (
    IdentifiableLanguagesService,
    IdentifyService,
)
from lang_translation_lib.services.models import (
    CreateModelService,
    DeleteModelService,
    GetModelService,
    ListModelsService,
)
from lang_translation_lib.services.translation import TranslateService
from lang_translation_lib.utils.http import HttpRequester
from lang_translation_lib.utils.validation import not_empty


def as_create_model_options(
    options: Union[Dict[str, Any], CreateModelOptions, None],
) -> CreateModelOptions:
    if isinstance(options, CreateModelOptions):
        return options
    if isinstance(options, dict):
        not_empty(options.get("base_model_id"), "Base model ID cannot be empty")
        return CreateModelOptions(**options)
    raise InvalidArgumentError("Create model options cannot be empty")


class LanguageTranslationClient:
    """
    Blocking client of the Language Translation service.

    Every method performs a single request and returns the decoded model.
    Invalid arguments raise :class:`InvalidArgumentError` before any request
    is sent; non‑2xx answers raise :class:`ServiceError`.
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config or ServiceConfig.from_env()
        self.logger = logger or logging.getLogger(__name__)
        self.http = HttpRequester(
            config=self.config,
            session=session,
            logger=self.logger,
        )

    def __enter__(self) -> "LanguageTranslationClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self.http.close()

    # ------------------------------------------------------------------ #
    def list_models(
        self,
        show_default: Optional[bool] = None,
        source: Optional[str] = None,
        target: Optional[str] = None,
        extra_params: Optional[Dict[str, Any]] = None,
    ) -> LanguageModels:
        return ListModelsService(self.logger).call(
            self.http,
            show_default=show_default,
            source=source,
            target=target,
            extra_params=extra_params,
        )

    # ------------------------------------------------------------------ #
    def get_model(self, model_id: str) -> LanguageModel:
        return GetModelService(self.logger).call(self.http, model_id)

    # ------------------------------------------------------------------ #
    def create_model(
        self, options: Union[Dict[str, Any], CreateModelOptions]
    ) -> LanguageModel:
        options = as_create_model_options(options)
        return CreateModelService(self.logger).call(self.http, options)

    # ------------------------------------------------------------------ #
    def delete_model(self, model_id: str) -> DeletionStatus:
        return DeleteModelService(self.logger).call(self.http, model_id)

    # ------------------------------------------------------------------ #
    def list_identifiable_languages(self) -> List[IdentifiableLanguage]:
        return IdentifiableLanguagesService(self.logger).call(self.http)

    # ------------------------------------------------------------------ #
    def identify(self, text: str) -> List[IdentifiedLanguage]:
        return IdentifyService(self.logger).call(self.http, text)

    # ------------------------------------------------------------------ #
    def translate(
        self,
        text: str,
        model_id: Optional[str] = None,
        source: Optional[str] = None,
        target: Optional[str] = None,
    ) -> TranslationResult:
        """
        Translate ``text`` with ``model_id``, or from ``source`` to ``target``.

        When ``model_id`` is given the language pair is ignored and not sent.
        """
        return TranslateService(self.logger).call(
            self.http, text, model_id=model_id, source=source, target=target
        )
