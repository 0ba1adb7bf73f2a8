"""
Base model definitions for the Language Translation client library.

Every value decoded from a service response derives from
:class:`BaseServiceModel`: instances are frozen once validated and accept
either the wire key or the Python attribute name on input.
"""

from pydantic import BaseModel, ConfigDict


class BaseServiceModel(BaseModel):
    """
    Immutable container for data produced by the remote service.

    Unknown keys sent by the service are ignored so that new response fields
    do not break older clients.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        protected_namespaces=(),
    )
