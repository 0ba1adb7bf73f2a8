"""
Service wrapper for the ``/v2/translate`` endpoint.
"""

from lang_translation_lib.data_models.translation import TranslationResult
from lang_translation_lib.services.service_interface import BaseServiceInterface
from lang_translation_lib.utils.request_builder import build_translate_request
from lang_translation_lib.utils.validation import is_empty, not_empty


class TranslateService(BaseServiceInterface):
    """
    Translate text with a model or with a source/target language pair.

    ``model_id`` takes precedence: when it is set, ``source`` and ``target``
    are not sent.  Without a model id both languages are required.

    Attributes
    ----------
    response_cls : type
        :class:`TranslationResult`.
    """

    response_cls = TranslationResult

    def build_request(self, text, model_id=None, source=None, target=None):
        not_empty(text, "Text cannot be empty")
        if not is_empty(model_id):
            return build_translate_request(text, model_id=model_id)

        not_empty(source, "Source cannot be empty")
        not_empty(target, "Target cannot be empty")
        return build_translate_request(text, source=source, target=target)
