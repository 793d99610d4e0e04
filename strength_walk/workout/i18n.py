"""Locale selection and UI string lookup."""

from __future__ import annotations

from typing import Iterable

from strength_walk.workout.model import WorkoutTexts

DEFAULT_LOCALE = "it"


class UnsupportedLocaleError(ValueError):
    """Raised when a locale is not in the supported set."""


def resolve_locale(
    requested: str | None,
    supported: Iterable[str],
    default: str = DEFAULT_LOCALE,
    *,
    strict: bool = False,
) -> str:
    """Pick the locale to render with.

    Unsupported requests fall back to ``default``, or to the first supported
    locale when the data does not carry ``default`` at all.
    """
    supported_list = list(supported)
    if requested is not None and requested in supported_list:
        return requested
    if strict:
        raise UnsupportedLocaleError(
            f"Locale '{requested}' not supported (available: {', '.join(sorted(supported_list))})"
        )
    fallback = default
    if supported_list and default not in supported_list:
        fallback = supported_list[0]
    if requested is not None:
        print(f"[I18N] language '{requested}' not supported, falling back to '{fallback}'")
    return fallback


def ui_text(texts: WorkoutTexts, locale: str, key: str, default_locale: str = DEFAULT_LOCALE) -> str:
    table = texts.ui.get(locale, {})
    if key in table:
        return table[key]
    return texts.ui.get(default_locale, {}).get(key, key)
