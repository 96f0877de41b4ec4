import logging
import os
import warnings
from typing import Callable, Dict, Optional, Sequence, Tuple

from .layout.layout_base import LayoutBase, LayoutConfigurationError
from .layout.layouts import (
    Azerty,
    EnglishCustomizer,
    FrenchCustomizer,
    GermanCustomizer,
    Hebrew,
    HebrewCustomizer,
    Qwerty,
    Qwertz,
    Spanish,
    SpanishCustomizer,
    TurkishCustomizer,
)

logger = logging.getLogger(__name__)

LayoutFactory = Callable[[], LayoutBase]

_LAYOUTS: Dict[str, LayoutFactory] = {}


def layout(locale: str) -> Callable[[LayoutFactory], LayoutFactory]:
    """
    Register the decorated function as the layout factory of `locale`.

    >>> @layout("en_US")
    >>> def english_us():
            return Qwerty(EnglishCustomizer("en_US"))
    """

    def _wrap(func: LayoutFactory) -> LayoutFactory:
        if locale in _LAYOUTS:
            raise LayoutConfigurationError(f"Layout for {locale} registered twice")
        _LAYOUTS[locale] = func
        return func

    return _wrap


def registered_locales() -> Tuple[str, ...]:
    return tuple(sorted(_LAYOUTS))


def layout_factory(locale: str) -> LayoutFactory:
    try:
        return _LAYOUTS[locale]
    except KeyError:
        raise KeyError(f"No layout registered for locale '{locale}'") from None


def get_layout_for_locale(locale: str) -> LayoutBase:
    """
    Build a fresh layout for `locale`, raises KeyError for unknown locales.
    """
    layout_base = layout_factory(locale)()
    logger.debug("Built %r for %s", layout_base, locale)
    return layout_base


def selected_locales(spec: Optional[str] = None) -> Sequence[str]:
    """
    The locales to test, from the colon-separated `spec` or the 'IME_LAYOUTS_LOCALES'
    environment variable. All registered locales are selected when neither is set.
    """
    if spec is None:
        spec = os.environ.get("IME_LAYOUTS_LOCALES")
    if not spec:
        return registered_locales()

    selected = []
    for locale in spec.split(":"):
        if not locale:
            continue
        if locale not in _LAYOUTS:
            warnings.warn(f"Ignoring unknown locale in IME_LAYOUTS_LOCALES: {locale}")
            continue
        selected.append(locale)
    return tuple(selected)


@layout("en_US")
def english_us():
    return Qwerty(EnglishCustomizer("en_US"))


@layout("de_DE")
def german():
    return Qwertz(GermanCustomizer("de_DE"))


@layout("fr_FR")
def french():
    return Azerty(FrenchCustomizer("fr_FR"))


@layout("es_ES")
def spanish():
    return Spanish(SpanishCustomizer("es_ES"))


@layout("tr_TR")
def turkish():
    return Qwerty(TurkishCustomizer("tr_TR"))


@layout("iw_IL")
def hebrew():
    return Hebrew(HebrewCustomizer("iw_IL"))
