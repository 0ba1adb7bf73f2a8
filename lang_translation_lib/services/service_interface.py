"""
Service layer binding one request builder to one response decoder.

The module defines a small abstract interface: a concrete service knows how
to build the :class:`ApiRequest` of its endpoint and how to decode the
:class:`RawResponse` into the pydantic model the caller receives.  The base
class provides a blocking ``call`` (for :class:`HttpRequester`) and an
awaitable ``acall`` (for :class:`AsyncHttpRequester`); both perform exactly
one request and never retry.
"""

import abc
import logging
from typing import Any, Optional, Type

from lang_translation_lib.data_models.api_request import ApiRequest, RawResponse
from lang_translation_lib.exceptions import ServiceError
from lang_translation_lib.utils.decoding import decode_object
from lang_translation_lib.utils.http import AsyncHttpRequester, HttpRequester


class BaseServiceInterface(abc.ABC):
    """
    Abstract base class for service wrappers.

    Sub‑classes implement :meth:`build_request` and set ``response_cls`` (the
    pydantic model used to decode a successful response).  Sub‑classes whose
    response is not a single JSON object override :meth:`decode`.
    """

    # Pydantic model class used to decode the response body.
    response_cls: Optional[Type[Any]] = None

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialise the service wrapper.

        Parameters
        ----------
        logger : logging.Logger
            Logger instance used for debugging and error reporting.
        """
        self.logger = logger or logging.getLogger(__name__)

    @abc.abstractmethod
    def build_request(self, *args, **kwargs) -> ApiRequest:
        pass

    def decode(self, resp: RawResponse) -> Any:
        return decode_object(resp, self.response_cls)

    def call(self, http: HttpRequester, *args, **kwargs) -> Any:
        """
        Build the request, send it through ``http`` and decode the response.

        Argument validation happens in :meth:`build_request`, so an
        :class:`InvalidArgumentError` is raised before anything is sent.

        Raises
        ------
        InvalidArgumentError
            If a required argument is empty.
        ServiceError
            If the service answers with a non‑2xx status code.
        DecodeError
            If a successful body cannot be decoded.
        """
        request = self.build_request(*args, **kwargs)
        return self._decode_logged(request, http.send(request))

    async def acall(self, http: AsyncHttpRequester, *args, **kwargs) -> Any:
        """Awaitable counterpart of :meth:`call`."""
        request = self.build_request(*args, **kwargs)
        return self._decode_logged(request, await http.send(request))

    def _decode_logged(self, request: ApiRequest, resp: RawResponse) -> Any:
        try:
            return self.decode(resp)
        except ServiceError as exc:
            self.logger.warning(
                "%s %s failed with status %s: %s",
                request.method,
                request.path,
                exc.status_code,
                exc.message,
            )
            raise
