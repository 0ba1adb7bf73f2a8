"""
Language Translation command‑line interface.

A thin shell front‑end over :class:`LanguageTranslationClient`.  The service
endpoint and credentials come from the ``LANGUAGE_TRANSLATION_*`` environment
variables (see :class:`ServiceConfig`); every sub‑command prints the decoded
response as JSON on standard output.

---

# Quick ways to run the script

1. Translate a file with a language pair

>>> language-translation translate examples/input.txt --source en --target es

2. Piping data through a custom model

>>> echo "Hello world" | language-translation translate --model-id en-es-custom

3. Identify the language of a text

>>> echo "Bonjour tout le monde" | language-translation identify

4. Train a custom model from a glossary

>>> language-translation create-model --base-model-id en-es \\
...     --name my-model --forced-glossary glossary.tmx

Service or argument errors are reported on standard error and the script
exits with status ``1``.
"""

import argparse
import json
import logging
import sys
from typing import Any, Optional

from lang_translation_lib.client import LanguageTranslationClient
from lang_translation_lib.config import ServiceConfig
from lang_translation_lib.data_models.api_request import CreateModelOptions
from lang_translation_lib.exceptions import LanguageTranslationError
from lang_translation_lib.utils.logger import prepare_logger


def _read_bytes(path: Optional[str]) -> Optional[bytes]:
    if not path:
        return None
    with open(path, "rb") as f:
        return f.read()


def _read_text(stream) -> str:
    try:
        return stream.read().strip()
    finally:
        if stream is not sys.stdin:
            stream.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translate and identify text with the Language Translation service."
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log outgoing requests (DEBUG level).",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    models = commands.add_parser("models", help="List translation models.")
    models.add_argument(
        "--default",
        dest="show_default",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show only default (or only non‑default) models.",
    )
    models.add_argument("--source", help="Filter by source language.")
    models.add_argument("--target", help="Filter by target language.")

    model = commands.add_parser("model", help="Show a single model.")
    model.add_argument("model_id")

    create = commands.add_parser("create-model", help="Train a custom model.")
    create.add_argument("--base-model-id", required=True)
    create.add_argument("--name")
    create.add_argument("--forced-glossary", help="TMX glossary file.")
    create.add_argument("--parallel-corpus", help="TMX parallel corpus file.")
    create.add_argument("--monolingual-corpus", help="Plain text corpus file.")

    delete = commands.add_parser("delete-model", help="Delete a custom model.")
    delete.add_argument("model_id")

    commands.add_parser("languages", help="List identifiable languages.")

    identify = commands.add_parser("identify", help="Identify the language of a text.")
    identify.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input file (defaults to STDIN).",
    )

    translate = commands.add_parser("translate", help="Translate a text.")
    translate.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input file (defaults to STDIN).",
    )
    translate.add_argument("--model-id", help="Model to translate with.")
    translate.add_argument("--source", help="Source language (without --model-id).")
    translate.add_argument("--target", help="Target language (without --model-id).")
    return parser


def run_command(client: LanguageTranslationClient, args: argparse.Namespace) -> Any:
    if args.command == "models":
        return client.list_models(
            show_default=args.show_default, source=args.source, target=args.target
        )
    if args.command == "model":
        return client.get_model(args.model_id)
    if args.command == "create-model":
        options = CreateModelOptions(
            base_model_id=args.base_model_id,
            name=args.name,
            forced_glossary=_read_bytes(args.forced_glossary),
            parallel_corpus=_read_bytes(args.parallel_corpus),
            monolingual_corpus=_read_bytes(args.monolingual_corpus),
        )
        return client.create_model(options)
    if args.command == "delete-model":
        return client.delete_model(args.model_id)
    if args.command == "languages":
        return client.list_identifiable_languages()
    if args.command == "identify":
        return client.identify(_read_text(args.input))
    if args.command == "translate":
        return client.translate(
            _read_text(args.input),
            model_id=args.model_id,
            source=args.source,
            target=args.target,
        )
    raise ValueError(f"Unknown command {args.command}")


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, list):
        return [_to_jsonable(item) for item in result]
    return result.model_dump(mode="json", by_alias=True)


def main(argv: Optional[list] = None, client=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = prepare_logger(
        "lang_translation", logging.DEBUG if args.verbose else logging.WARNING
    )

    try:
        if client is None:
            client = LanguageTranslationClient(ServiceConfig.from_env(), logger=logger)
        result = run_command(client, args)
    except (LanguageTranslationError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    json.dump(_to_jsonable(result), sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
