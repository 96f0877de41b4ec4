from typing import Optional

import pytest
from ime_layouts.expected import ExpectedKey, Layout
from ime_layouts.expected.common import (
    ALPHABET_KEY,
    BACK_TO_SYMBOLS_KEY,
    DELETE_KEY,
    EMOJI_KEY,
    ENTER_AND_EMOJI_KEY,
    ENTER_KEY,
    SYMBOLS_SHIFT_KEY,
    TABLET_SYMBOLS_SHIFT_KEY,
)
from ime_layouts.layout import EuroLayoutCustomizer, LayoutCustomizer, RtlSymbols, RtlSymbolsShifted
from ime_layouts.layout import Symbols, SymbolsShifted, symbols

PLACEHOLDERS = {symbols.CURRENCY, symbols.DOUBLE_QUOTE, symbols.SINGLE_QUOTE, symbols.OTHER_CURRENCIES}


def find(layout: Layout, label: str) -> Optional[ExpectedKey]:
    return next((k for row in layout for k in row if k.label == label), None)


class TestSymbols:
    @pytest.mark.parametrize("is_phone", [True, False])
    def test_placeholders_are_substituted(self, is_phone: bool) -> None:
        layout = Symbols(LayoutCustomizer("en_US")).get_layout(is_phone)
        assert not PLACEHOLDERS.intersection(k.label for row in layout for k in row)

    def test_currency_comes_from_customizer(self) -> None:
        assert Symbols(LayoutCustomizer("en_US")).get_layout(True)[1][2] == symbols.CURRENCY_DOLLAR
        assert Symbols(EuroLayoutCustomizer("de_DE")).get_layout(True)[1][2] == symbols.CURRENCY_EURO

    def test_quotes_come_from_customizer(self) -> None:
        layout = Symbols(LayoutCustomizer("en_US")).get_layout(True)
        double_quote = find(layout, '"')
        single_quote = find(layout, "'")
        assert double_quote is not None and single_quote is not None
        assert double_quote.more_keys == symbols.DOUBLE_QUOTES_9LR + symbols.DOUBLE_ANGLE_QUOTES_LR
        assert single_quote.more_keys == symbols.SINGLE_QUOTES_9LR + symbols.SINGLE_ANGLE_QUOTES_LR

    def test_phone_function_keys(self) -> None:
        layout = Symbols(LayoutCustomizer("en_US")).get_layout(True)
        assert len(layout) == 4
        assert layout[2][0] == SYMBOLS_SHIFT_KEY
        assert layout[2][-1] == DELETE_KEY
        assert layout[3][0] == ALPHABET_KEY
        assert layout[3][-1] == ENTER_AND_EMOJI_KEY

    def test_tablet_function_keys(self) -> None:
        layout = Symbols(LayoutCustomizer("en_US")).get_layout(False)
        assert layout[0][-1] == DELETE_KEY
        assert layout[1][-1] == ENTER_KEY
        assert [k.visual for k in layout[2][:3]] == [TABLET_SYMBOLS_SHIFT_KEY.visual, "\\", "="]
        assert layout[2][-1] == TABLET_SYMBOLS_SHIFT_KEY
        assert layout[3][0] == ALPHABET_KEY
        assert layout[3][-1] == EMOJI_KEY

    def test_is_deterministic(self) -> None:
        customizer = LayoutCustomizer("en_US")
        assert Symbols(customizer).get_layout(True) == Symbols(customizer).get_layout(True)


class TestSymbolsShifted:
    def test_other_currencies_lead_second_row(self) -> None:
        layout = SymbolsShifted(LayoutCustomizer("en_US")).get_layout(True)
        assert layout[1][:4] == symbols.CURRENCIES_OTHER_THAN_DOLLAR
        layout = SymbolsShifted(EuroLayoutCustomizer("de_DE")).get_layout(True)
        assert layout[1][:4] == symbols.CURRENCIES_OTHER_THAN_EURO

    def test_phone_function_keys(self) -> None:
        layout = SymbolsShifted(LayoutCustomizer("en_US")).get_layout(True)
        assert layout[2][0] == BACK_TO_SYMBOLS_KEY
        assert layout[2][-1] == DELETE_KEY
        assert layout[3][0] == ALPHABET_KEY
        assert layout[3][-1] == ENTER_AND_EMOJI_KEY

    def test_tablet_function_keys(self) -> None:
        layout = SymbolsShifted(LayoutCustomizer("en_US")).get_layout(False)
        assert layout[0][-1] == DELETE_KEY
        assert layout[1][-1] == ENTER_KEY
        assert layout[2][0] == BACK_TO_SYMBOLS_KEY
        assert [k.visual for k in layout[2][-3:]] == ["¡", "¿", BACK_TO_SYMBOLS_KEY.visual]
        assert layout[3][-1] == EMOJI_KEY


class TestRtlSymbols:
    @pytest.mark.parametrize("is_phone", [True, False])
    def test_parentheses_are_mirrored(self, is_phone: bool) -> None:
        layout = RtlSymbols(LayoutCustomizer("iw_IL")).get_layout(is_phone)
        left, right = find(layout, "("), find(layout, ")")
        assert left is not None and right is not None
        assert (left.output, right.output) == (")", "(")
        assert [k.output for k in left.more_keys] == [">", "}", "]"]

    def test_shifted_brackets_are_mirrored(self) -> None:
        layout = RtlSymbolsShifted(LayoutCustomizer("iw_IL")).get_layout(True)
        assert [find(layout, label).output for label in "<>{}[]"] == list("><}{][")  # type: ignore

    def test_other_keys_match_left_to_right_tables(self) -> None:
        customizer = LayoutCustomizer("iw_IL")
        rtl = RtlSymbols(customizer).get_layout(True)
        ltr = Symbols(customizer).get_layout(True)
        assert rtl[0] == ltr[0]
        assert rtl[2] == ltr[2]
