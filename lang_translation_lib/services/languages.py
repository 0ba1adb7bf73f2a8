"""
Service wrappers for language identification.

Both endpoints answer with a list of languages.  The service wraps the list in
a ``{"languages": [...]}`` envelope; a bare JSON array is accepted as well.
"""

from typing import List

from lang_translation_lib.data_models.api_request import RawResponse
from lang_translation_lib.data_models.translation import (
    IdentifiableLanguage,
    IdentifiedLanguage,
)
from lang_translation_lib.services.service_interface import BaseServiceInterface
from lang_translation_lib.utils.decoding import decode_list
from lang_translation_lib.utils.request_builder import (
    build_identifiable_languages_request,
    build_identify_request,
)

LANGUAGES_ENVELOPE = "languages"


class IdentifiableLanguagesService(BaseServiceInterface):
    """``GET /v2/identifiable_languages``: languages the service can recognise."""

    response_cls = IdentifiableLanguage

    def build_request(self):
        return build_identifiable_languages_request()

    def decode(self, resp: RawResponse) -> List[IdentifiableLanguage]:
        return decode_list(resp, self.response_cls, LANGUAGES_ENVELOPE)


class IdentifyService(BaseServiceInterface):
    """
    ``POST /v2/identify`` with the text as a plain‑text body.

    The languages are returned in the order sent by the service (highest
    confidence first); they are not re‑sorted locally.
    """

    response_cls = IdentifiedLanguage

    def build_request(self, text):
        return build_identify_request(text)

    def decode(self, resp: RawResponse) -> List[IdentifiedLanguage]:
        return decode_list(resp, self.response_cls, LANGUAGES_ENVELOPE)
