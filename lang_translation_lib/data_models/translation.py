"""
Pydantic models for the values returned by the translation service.

The classes mirror the JSON documents sent back by the ``/v2/models``,
``/v2/identify``, ``/v2/identifiable_languages`` and ``/v2/translate``
endpoints.  Attribute names are Pythonic; where the wire key differs, the
field carries an alias so ``model_dump(by_alias=True)`` reproduces the
service payload.
"""

from typing import List, Optional

from pydantic import AliasChoices, Field

from lang_translation_lib.data_models.base_model import BaseServiceModel


# -------------------------------------------------------------------
# Translation models
# -------------------------------------------------------------------
class LanguageModel(BaseServiceModel):
    """
    A server‑side translation model (a base model or a customised one).

    Attributes
    ----------
    model_id : str
        Identifier of the model, used by ``translate`` and ``delete_model``.
    source, target : Optional[str]
        Language codes the model translates from / to.
    base_model_id : Optional[str]
        Model this one was derived from; empty for base models.
    domain : Optional[str]
        Domain the model is tuned for (e.g. ``"news"``).
    customizable : bool
        Whether the model can be used as a base for a custom model.
    default_model : bool
        Whether this is the default model for its language pair.
    owner, status, name : Optional[str]
        Ownership, training status and display name.
    """

    model_id: str
    source: Optional[str] = None
    target: Optional[str] = None
    base_model_id: Optional[str] = None
    domain: Optional[str] = None
    customizable: bool = False
    default_model: bool = False
    owner: Optional[str] = None
    status: Optional[str] = None
    name: Optional[str] = None


class LanguageModels(BaseServiceModel):
    """Ordered list of models returned by the models collection endpoint."""

    models: List[LanguageModel] = []


class DeletionStatus(BaseServiceModel):
    """Acknowledgement returned by ``delete_model``."""

    status: str = "OK"


# -------------------------------------------------------------------
# Language identification
# -------------------------------------------------------------------
class IdentifiedLanguage(BaseServiceModel):
    """
    A language detected in a text, with the service's confidence.

    ``confidence`` is expected in ``[0.0, 1.0]``; the range is not enforced
    locally.
    """

    language_code: str = Field(
        alias="language",
        validation_alias=AliasChoices("language", "language_code"),
    )
    confidence: float


class IdentifiableLanguage(BaseServiceModel):
    """A language the service is able to recognise."""

    language_code: str = Field(
        alias="language",
        validation_alias=AliasChoices("language", "language_code"),
    )
    name: str


# -------------------------------------------------------------------
# Translation
# -------------------------------------------------------------------
class Translation(BaseServiceModel):
    translation_output: str = Field(
        alias="translation",
        validation_alias=AliasChoices("translation", "translation_output"),
    )


class TranslationResult(BaseServiceModel):
    """
    Result of a ``/v2/translate`` call.

    Attributes
    ----------
    word_count : int
        Number of words in the source text.
    character_count : int
        Number of characters in the source text.
    translations : List[Translation]
        One entry per translated paragraph, in request order.
    """

    word_count: int = 0
    character_count: int = 0
    translations: List[Translation] = []
