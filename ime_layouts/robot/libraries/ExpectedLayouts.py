from typing import List

from ime_layouts.constants import ElementId
from ime_layouts.expected import Layout
from ime_layouts.registry import get_layout_for_locale
from robot.api import logger
from robot.api.deco import keyword, library

FORM_FACTORS = {"phone": True, "tablet": False}


@library(scope="GLOBAL")
class ExpectedLayouts:
    """
    A Robot Framework library giving access to the expected keyboard layouts.

    Form factors are `phone` or `tablet`, elements are `ElementId` names such as
    `ALPHABET` or `SYMBOLS_SHIFTED`.
    """

    @keyword
    def get_expected_layout(self, locale: str, form_factor: str, element: str = "ALPHABET") -> Layout:
        """
        :raises ValueError: if the layout has no such element
        """
        try:
            is_phone = FORM_FACTORS[form_factor]
            element_id = ElementId[element]
        except KeyError as ex:
            raise ValueError(f"Unknown form factor or element: {ex}") from None

        layout = get_layout_for_locale(locale).get_layout(is_phone, element_id)
        if layout is None:
            raise ValueError(f"No {element} layout for {locale} on {form_factor}")
        logger.info(f"{locale} {form_factor} {element}: {len(layout)} rows")
        return layout

    @keyword
    def get_row_labels(self, locale: str, form_factor: str, element: str, row: int) -> List[str]:
        """Visuals of the keys on `row`, counting from 1."""
        layout = self.get_expected_layout(locale, form_factor, element)
        row = int(row)
        if not 1 <= row <= len(layout):
            raise ValueError(f"Row {row} is out of range, layout has {len(layout)} rows")
        return [k.visual for k in layout[row - 1]]

    @keyword
    def layout_should_contain_key(self, locale: str, form_factor: str, element: str, label: str) -> None:
        layout = self.get_expected_layout(locale, form_factor, element)
        if not any(k.visual == label for row in layout for k in row):
            raise AssertionError(f"Key '{label}' not found in {locale} {form_factor} {element}")
