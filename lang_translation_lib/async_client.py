"""
``asyncio`` flavour of :class:`LanguageTranslationClient`.

Each coroutine issues exactly one request through a shared
``httpx.AsyncClient`` and resolves to one decoded model or one exception.
The client holds no per‑call state, so coroutines may run concurrently
(e.g. under ``asyncio.gather``) without locking.
"""

import logging
from typing import Any, Dict, List, Optional, Union

import httpx

from lang_translation_lib.client import as_create_model_options
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
from lang_translation_lib.utils.http import AsyncHttpRequester


class AsyncLanguageTranslationClient:
    """
    Non‑blocking client of the Language Translation service.

    Use as ``async with AsyncLanguageTranslationClient(config) as client:``
    or call :meth:`aclose` when done.
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config or ServiceConfig.from_env()
        self.logger = logger or logging.getLogger(__name__)
        self.http = AsyncHttpRequester(
            config=self.config,
            client=client,
            logger=self.logger,
        )

    async def __aenter__(self) -> "AsyncLanguageTranslationClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.http.aclose()

    # ------------------------------------------------------------------ #
    async def list_models(
        self,
        show_default: Optional[bool] = None,
        source: Optional[str] = None,
        target: Optional[str] = None,
        extra_params: Optional[Dict[str, Any]] = None,
    ) -> LanguageModels:
        return await ListModelsService(self.logger).acall(
            self.http,
            show_default=show_default,
            source=source,
            target=target,
            extra_params=extra_params,
        )

    # ------------------------------------------------------------------ #
    async def get_model(self, model_id: str) -> LanguageModel:
        return await GetModelService(self.logger).acall(self.http, model_id)

    # ------------------------------------------------------------------ #
    async def create_model(
        self, options: Union[Dict[str, Any], CreateModelOptions]
    ) -> LanguageModel:
        options = as_create_model_options(options)
        return await CreateModelService(self.logger).acall(self.http, options)

    # ------------------------------------------------------------------ #
    async def delete_model(self, model_id: str) -> DeletionStatus:
        return await DeleteModelService(self.logger).acall(self.http, model_id)

    # ------------------------------------------------------------------ #
    async def list_identifiable_languages(self) -> List[IdentifiableLanguage]:
        return await IdentifiableLanguagesService(self.logger).acall(self.http)

    # ------------------------------------------------------------------ #
    async def identify(self, text: str) -> List[IdentifiedLanguage]:
        return await IdentifyService(self.logger).acall(self.http, text)

    # ------------------------------------------------------------------ #
    async def translate(
        self,
        text: str,
        model_id: Optional[str] = None,
        source: Optional[str] = None,
        target: Optional[str] = None,
    ) -> TranslationResult:
        return await TranslateService(self.logger).acall(
            self.http, text, model_id=model_id, source=source, target=target
        )
