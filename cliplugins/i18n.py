"""Message translation for the list plugin."""

from __future__ import annotations

import json
import os
import posixpath
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .resources import asset, asset_names

DEFAULT_LOCALE = "en_US"
RESOURCES_SUFFIX = ".all.json"

_PLACEHOLDER = re.compile(r"\{\{\s*\.(\w+)\s*\}\}")
_LANGUAGE_SEPARATORS = re.compile(r"[,;.]")
_LANGUAGE_BASE = re.compile(r"[a-z]{2,3}")
_SCRIPT_ALIASES = {
    "zh-cn": "zh-hans",
    "zh-sg": "zh-hans",
    "zh-hk": "zh-hant",
    "zh-tw": "zh-hant",
}


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    return str(value)


def render(template: str, args: Mapping[str, Any] | None = None) -> str:
    """Fill ``{{.Key}}`` placeholders of a template from ``args``."""
    values = args or {}

    def substitute(match: re.Match) -> str:
        key = match.group(1)
        if key not in values:
            return "<no value>"
        return _format(values[key])

    return _PLACEHOLDER.sub(substitute, template)


def _render_translation(
    translations: Mapping[str, str], translation_id: str, args: Mapping[str, Any] | None
) -> str:
    template = translations.get(translation_id)
    if not template:
        return translation_id
    return render(template, args) or translation_id


@dataclass(frozen=True)
class Translator:
    """Translates message ids, deferring to a fallback for untranslated ones."""

    translations: Mapping[str, str]
    fallback: Translator | None = None

    def __call__(self, translation_id: str, args: Mapping[str, Any] | None = None) -> str:
        translated = _render_translation(self.translations, translation_id, args)
        if translated != translation_id or self.fallback is None:
            return translated
        return self.fallback(translation_id, args)


def normalize_locale(locale: str) -> str:
    """Lower-case a locale name and separate its parts with hyphens."""
    return locale.replace("_", "-").lower()


def supported_locales() -> dict[str, str]:
    """Map each bundled normalized locale to the asset holding its messages."""
    locales = {}
    for name in asset_names():
        base = posixpath.basename(name)
        if base.endswith(RESOURCES_SUFFIX):
            base = base[: -len(RESOURCES_SUFFIX)]
        locales[normalize_locale(base)] = name
    return locales


def load_translations(asset_name: str) -> dict[str, str]:
    """Read a bundled translation file into a mapping of id to translation."""
    entries = json.loads(asset(asset_name).decode("utf-8"))
    return {entry["id"]: entry["translation"] for entry in entries}


def _parse_languages(source: str) -> list[str]:
    pieces = [piece.strip() for piece in _LANGUAGE_SEPARATORS.split(source)]
    tags: list[str] = []
    for piece in pieces:
        tag = normalize_locale(piece)
        if _LANGUAGE_BASE.fullmatch(tag.split("-")[0]) and tag not in tags:
            tags.append(tag)
    return tags


def _matching_tags(tag: str) -> list[str]:
    parts = tag.split("-")
    return ["-".join(parts[: count + 1]) for count in range(len(parts))]


def _match_locale(tag: str, supported: Mapping[str, str]) -> str:
    matched = ""
    for candidate in reversed(sorted(_matching_tags(tag))):
        for locale in sorted(supported):
            if locale.startswith(candidate):
                matched = locale
    return matched


def _default_asset() -> str:
    return f"i18n/resources/{DEFAULT_LOCALE}{RESOURCES_SUFFIX}"


_active: Translator | None = None


def init(locale: str | None = None, environ: Mapping[str, str] | None = None) -> Translator:
    """Choose a translator from the given locale, then LC_ALL, then LANG.

    The chosen translator becomes the one ``translate`` uses and is returned.
    """
    global _active
    env = os.environ if environ is None else environ
    default = Translator(load_translations(_default_asset()))
    supported = supported_locales()
    chosen = default
    for source in (locale, env.get("LC_ALL"), env.get("LANG")):
        if not source:
            continue
        matched = ""
        for tag in _parse_languages(source):
            matched = _match_locale(_SCRIPT_ALIASES.get(tag, tag), supported)
            if matched:
                break
        if matched:
            chosen = Translator(load_translations(supported[matched]), fallback=default)
            break
    _active = chosen
    return chosen


def translate(translation_id: str, args: Mapping[str, Any] | None = None) -> str:
    """Translate with the translator chosen by the last ``init``, English if none."""
    global _active
    if _active is None:
        _active = Translator(load_translations(_default_asset()))
    return _active(translation_id, args)