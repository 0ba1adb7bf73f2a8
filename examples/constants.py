import os

# ----------------------------------------------------------------------
# Model and language pair used by the examples.  Run ``language-translation
# models`` to see which ones your service instance offers.
# ----------------------------------------------------------------------
MODEL_ID = os.getenv("LANGUAGE_TRANSLATION_EXAMPLE_MODEL", "en-es")
SOURCE = "en"
TARGET = "es"

TEXTS = [
    "The leaves turned orange and red overnight!",
    "White shoes always get dirty so quickly.",
    "Bonjour, comment allez-vous ?",
]
