"""
Request‑side models: caller options and the transport‑neutral request/response
envelopes exchanged between the builders, the requesters and the decoder.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class CreateModelOptions(BaseModel):
    """
    Options accepted by ``create_model``.

    Attributes
    ----------
    base_model_id : str
        Model to customise; must be non‑empty.
    name : Optional[str]
        Display name of the new model.
    forced_glossary : Optional[bytes]
        TMX glossary whose terms are always translated as given.
    parallel_corpus : Optional[bytes]
        TMX file of aligned source/target sentences.
    monolingual_corpus : Optional[bytes]
        Plain text in the target language.
    """

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    base_model_id: str
    name: Optional[str] = None
    forced_glossary: Optional[bytes] = None
    parallel_corpus: Optional[bytes] = None
    monolingual_corpus: Optional[bytes] = None


class ApiRequest(BaseModel):
    """
    Fully specified outbound request, independent of the HTTP library.

    Exactly one body representation is used: ``json_body``, ``content`` (raw
    text) or ``parts`` (multi‑part form).  Each part is
    ``(name, (filename, payload, content_type))``; text fields carry ``None``
    as filename and content type.
    """

    model_config = ConfigDict(frozen=True)

    method: str
    path: str
    params: List[Tuple[str, str]] = []
    headers: Dict[str, str] = {}
    json_body: Optional[Dict[str, Any]] = None
    content: Optional[str] = None
    parts: List[Tuple[str, Tuple[Optional[str], bytes, Optional[str]]]] = []

    @property
    def part_names(self) -> List[str]:
        """Names of the multi‑part fields, in the order they are sent."""
        return [name for name, _ in self.parts]


class RawResponse(BaseModel):
    """Status code, body and headers of a response, as handed to the decoder."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: bytes = b""
    headers: Dict[str, str] = {}

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")
