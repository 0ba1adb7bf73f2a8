"""
Service configuration for the Language Translation client.

:class:`ServiceConfig` is a frozen value holder for the endpoint and the
credentials.  :meth:`ServiceConfig.from_env` builds one from environment
variables, allowing the deployment environment to control the client without
code changes.
"""

import os
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from lang_translation_lib.utils.validation import not_empty


class _DontChangeMe:
    MAIN_ENV_PREFIX = "LANGUAGE_TRANSLATION_"


DEFAULT_ENDPOINT_URL = "https://gateway.watsonplatform.net/language-translation/api"

# Default per‑request timeout in seconds
DEFAULT_TIMEOUT = 10.0


class ServiceConfig(BaseModel):
    """
    Endpoint and credentials of the remote service.

    Attributes
    ----------
    endpoint_url : str
        Base URL; endpoint paths such as ``/v2/translate`` are appended to it.
    username, password : Optional[str]
        Basic‑auth credentials.
    token : Optional[str]
        Bearer token, used instead of basic auth when set.
    timeout : float
        Per‑request timeout in seconds, enforced by the transport.
    """

    model_config = ConfigDict(frozen=True)

    endpoint_url: str = DEFAULT_ENDPOINT_URL
    username: Optional[str] = None
    password: Optional[str] = None
    token: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    def __init__(self, **data):
        url = data.get("endpoint_url", DEFAULT_ENDPOINT_URL)
        if isinstance(url, str):
            url = url.strip().rstrip("/")
        not_empty(url, "Endpoint url cannot be empty")
        super().__init__(**data)

    @field_validator("endpoint_url")
    @classmethod
    def _strip_endpoint(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @property
    def basic_auth(self) -> Optional[Tuple[str, str]]:
        if self.token or not self.username:
            return None
        return self.username, self.password or ""

    @classmethod
    def from_env(cls, prefix: str = _DontChangeMe.MAIN_ENV_PREFIX) -> "ServiceConfig":
        """Read ``<prefix>URL``, ``USERNAME``, ``PASSWORD``, ``TOKEN`` and ``TIMEOUT``."""
        return cls(
            endpoint_url=os.environ.get(f"{prefix}URL", DEFAULT_ENDPOINT_URL).strip(),
            username=os.environ.get(f"{prefix}USERNAME") or None,
            password=os.environ.get(f"{prefix}PASSWORD") or None,
            token=os.environ.get(f"{prefix}TOKEN") or None,
            timeout=float(os.environ.get(f"{prefix}TIMEOUT", DEFAULT_TIMEOUT)),
        )
