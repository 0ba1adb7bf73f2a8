"""
Service wrappers for the ``/v2/models`` endpoints.

The classes bind the model‑related request builders to the pydantic models
their responses decode into.
"""

from lang_translation_lib.data_models.api_request import RawResponse
from lang_translation_lib.data_models.translation import (
    DeletionStatus,
    LanguageModel,
    LanguageModels,
)
from lang_translation_lib.services.service_interface import BaseServiceInterface
from lang_translation_lib.utils.decoding import decode_object, raise_for_status
from lang_translation_lib.utils.request_builder import (
    build_create_model_request,
    build_delete_model_request,
    build_model_request,
    build_models_list_request,
)


class ListModelsService(BaseServiceInterface):
    """
    ``GET /v2/models`` filtered by ``default``, ``source`` and ``target``.

    Returns a :class:`LanguageModels` in the order sent by the service.
    """

    response_cls = LanguageModels

    def build_request(
        self, show_default=None, source=None, target=None, extra_params=None
    ):
        return build_models_list_request(
            show_default=show_default,
            source=source,
            target=target,
            extra_params=extra_params,
        )


class GetModelService(BaseServiceInterface):
    """``GET /v2/models/{model_id}``: a single :class:`LanguageModel`."""

    response_cls = LanguageModel

    def build_request(self, model_id):
        return build_model_request(model_id)


class CreateModelService(BaseServiceInterface):
    """
    ``POST /v2/models`` with a multi‑part body describing the custom model.

    The service answers with the newly created :class:`LanguageModel`, usually
    in a training status.
    """

    response_cls = LanguageModel

    def build_request(self, options):
        return build_create_model_request(options)


class DeleteModelService(BaseServiceInterface):
    """
    ``DELETE /v2/models/{model_id}``.

    A successful call yields a :class:`DeletionStatus`; an empty body counts
    as an ``"OK"`` acknowledgement.
    """

    response_cls = DeletionStatus

    def build_request(self, model_id):
        return build_delete_model_request(model_id)

    def decode(self, resp: RawResponse) -> DeletionStatus:
        raise_for_status(resp)
        if not resp.body.strip():
            return DeletionStatus()
        return decode_object(resp, DeletionStatus)
