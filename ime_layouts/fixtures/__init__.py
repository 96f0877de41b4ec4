from typing import Optional, Sequence

import pytest

from ..registry import layout_factory, selected_locales


def layout_params(locales: Optional[Sequence[str]] = None) -> Sequence:
    """
    Use this in parametrization to run a test once per selected locale.

    >>> @pytest.mark.parametrize("layout_factory", layout_params())
    >>> def test_func(layout_factory):
            layout = layout_factory()
    """
    if locales is None:
        locales = selected_locales()
    return tuple(pytest.param(layout_factory(locale), id=locale) for locale in locales)
