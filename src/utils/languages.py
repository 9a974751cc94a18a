"""Preferred user interface languages of the running process."""
from __future__ import annotations

import os
from typing import List, Mapping, Optional

_CATEGORY_VARIABLES = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")

_CODESET = 1 << 0
_TERRITORY = 1 << 1
_MODIFIER = 1 << 2


def _explode_locale(locale: str) -> tuple[str, str, str, str, int]:
    mask = 0
    language, modifier = locale, ""
    if "@" in language:
        language, modifier = language.split("@", 1)
        modifier = "@" + modifier
        mask |= _MODIFIER
    codeset = ""
    if "." in language:
        language, codeset = language.split(".", 1)
        codeset = "." + codeset
        mask |= _CODESET
    territory = ""
    if "_" in language:
        language, territory = language.split("_", 1)
        territory = "_" + territory
        mask |= _TERRITORY
    return language, territory, codeset, modifier, mask


def locale_variants(locale: str) -> List[str]:
    """Return the variants of ``locale`` from most to least specific.

    ``en_US.UTF-8`` yields ``en_US.UTF-8``, ``en_US``, ``en.UTF-8`` and ``en``.
    """

    language, territory, codeset, modifier, mask = _explode_locale(locale)
    variants: List[str] = []
    for i in range(mask, -1, -1):
        if i & ~mask:
            continue
        variant = language
        if i & _TERRITORY:
            variant += territory
        if i & _CODESET:
            variant += codeset
        if i & _MODIFIER:
            variant += modifier
        variants.append(variant)
    return variants


def _guess_category_value(environ: Mapping[str, str]) -> Optional[str]:
    for name in _CATEGORY_VARIABLES:
        value = environ.get(name)
        if value:
            return value
    return None


def system_languages(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return acceptable languages, most preferred first, always ending in ``C``."""

    env = os.environ if environ is None else environ
    value = _guess_category_value(env) or "C"
    languages: List[str] = []
    for locale in value.split(":"):
        if not locale:
            continue
        for variant in locale_variants(locale):
            if variant not in languages:
                languages.append(variant)
    if "C" not in languages:
        languages.append("C")
    return languages
