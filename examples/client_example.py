"""
Language Translation client examples.

Demonstrates the blocking and the ``asyncio`` clients.  The endpoint and the
credentials are read from the ``LANGUAGE_TRANSLATION_*`` environment variables.
"""

import asyncio
import json

from constants import MODEL_ID, SOURCE, TARGET, TEXTS

from lang_translation_lib import (
    AsyncLanguageTranslationClient,
    LanguageTranslationClient,
    ServiceConfig,
)


def _print(title, value):
    print("- " * 40)
    print(f" =========== {title} =========== ")
    if isinstance(value, list):
        value = [item.model_dump(by_alias=True) for item in value]
    else:
        value = value.model_dump(by_alias=True)
    print(json.dumps(value, indent=2, ensure_ascii=False))


# ---------------------------
# 1. Blocking client
# ---------------------------
def sync_example(config: ServiceConfig):
    with LanguageTranslationClient(config) as client:
        _print("models", client.list_models(show_default=True, source=SOURCE))
        _print("translate (model)", client.translate(TEXTS[0], model_id=MODEL_ID))
        _print(
            "translate (pair)",
            client.translate(TEXTS[1], source=SOURCE, target=TARGET),
        )
        _print("identify", client.identify(TEXTS[2]))


# ---------------------------
# 2. Async client, concurrent calls
# ---------------------------
async def async_example(config: ServiceConfig):
    async with AsyncLanguageTranslationClient(config) as client:
        results = await asyncio.gather(
            *[client.translate(text, source=SOURCE, target=TARGET) for text in TEXTS]
        )
        for text, result in zip(TEXTS, results):
            print(f"{text} -> {result.translations[0].translation_output}")


if __name__ == "__main__":
    service_config = ServiceConfig.from_env()
    sync_example(service_config)
    asyncio.run(async_example(service_config))
