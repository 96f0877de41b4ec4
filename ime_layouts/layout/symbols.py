from typing import TYPE_CHECKING, Tuple

from ..expected import ExpectedKey, ExpectedKeyboardBuilder, Layout, join_keys, key, more_key
from ..expected.common import DELETE_KEY, EMOJI_KEY, ENTER_AND_EMOJI_KEY, ENTER_KEY, SPACEBAR

if TYPE_CHECKING:
    from .customizer import LayoutCustomizer

# Placeholder labels substituted from the customizer.
CURRENCY = "CURRENCY"
DOUBLE_QUOTE = "DOUBLE_QUOTE"
SINGLE_QUOTE = "SINGLE_QUOTE"
OTHER_CURRENCIES = "OTHER_CURRENCIES"

DOLLAR_SIGN = key("$")
CENT_SIGN = key("¢")
POUND_SIGN = key("£")
YEN_SIGN = key("¥")
EURO_SIGN = key("€")
PESO_SIGN = key("₱")
CURRENCY_DOLLAR = key("$", CENT_SIGN, POUND_SIGN, EURO_SIGN, YEN_SIGN, PESO_SIGN)
CURRENCY_EURO = key("€", CENT_SIGN, POUND_SIGN, DOLLAR_SIGN, YEN_SIGN, PESO_SIGN)
CURRENCY_GENERIC_MORE_KEYS = join_keys(CENT_SIGN, POUND_SIGN, DOLLAR_SIGN, YEN_SIGN, PESO_SIGN)

CURRENCIES_OTHER_THAN_DOLLAR = join_keys(POUND_SIGN, CENT_SIGN, EURO_SIGN, YEN_SIGN)
CURRENCIES_OTHER_THAN_EURO = join_keys(POUND_SIGN, YEN_SIGN, key(DOLLAR_SIGN, CENT_SIGN), CENT_SIGN)
CURRENCIES_OTHER_GENERIC = join_keys(POUND_SIGN, EURO_SIGN, key(DOLLAR_SIGN, CENT_SIGN), YEN_SIGN)

# U+201C “, U+201D ”, U+201E „
DQUOTE_LEFT = key("“")
DQUOTE_RIGHT = key("”")
DQUOTE_LOW9 = key("„")
DOUBLE_QUOTES_9LR = (DQUOTE_LOW9, DQUOTE_LEFT, DQUOTE_RIGHT)
DOUBLE_QUOTES_R9L = (DQUOTE_RIGHT, DQUOTE_LOW9, DQUOTE_LEFT)
DOUBLE_QUOTES_L9R = (DQUOTE_LEFT, DQUOTE_LOW9, DQUOTE_RIGHT)
DOUBLE_QUOTES_LR9 = (DQUOTE_LEFT, DQUOTE_RIGHT, DQUOTE_LOW9)

# U+00AB «, U+00BB »
DAQUOTE_LEFT = key("«")
DAQUOTE_RIGHT = key("»")
DOUBLE_ANGLE_QUOTES_LR = (DAQUOTE_LEFT, DAQUOTE_RIGHT)
DOUBLE_ANGLE_QUOTES_RL = (DAQUOTE_RIGHT, DAQUOTE_LEFT)
DOUBLE_ANGLE_QUOTES_LR_RTL = (more_key("«", "»"), more_key("»", "«"))

# U+2018 ‘, U+2019 ’, U+201A ‚
SQUOTE_LEFT = key("‘")
SQUOTE_RIGHT = key("’")
SQUOTE_LOW9 = key("‚")
SINGLE_QUOTES_9LR = (SQUOTE_LOW9, SQUOTE_LEFT, SQUOTE_RIGHT)
SINGLE_QUOTES_R9L = (SQUOTE_RIGHT, SQUOTE_LOW9, SQUOTE_LEFT)
SINGLE_QUOTES_L9R = (SQUOTE_LEFT, SQUOTE_LOW9, SQUOTE_RIGHT)
SINGLE_QUOTES_LR9 = (SQUOTE_LEFT, SQUOTE_RIGHT, SQUOTE_LOW9)

# U+2039 ‹, U+203A ›
SAQUOTE_LEFT = key("‹")
SAQUOTE_RIGHT = key("›")
SINGLE_ANGLE_QUOTES_LR = (SAQUOTE_LEFT, SAQUOTE_RIGHT)
SINGLE_ANGLE_QUOTES_RL = (SAQUOTE_RIGHT, SAQUOTE_LEFT)
SINGLE_ANGLE_QUOTES_LR_RTL = (more_key("‹", "›"), more_key("›", "‹"))

SYMBOLS_COMMON: Layout = (
    ExpectedKeyboardBuilder()
    .set_keys_of_row(
        1,
        key("1", "¹", "½", "⅓", "¼", "⅛"),
        key("2", "²", "⅔"),
        key("3", "³", "¾", "⅜"),
        key("4", "⁴"),
        key("5", "⅝"),
        key("6"),
        key("7", "⅞"),
        key("8"),
        key("9"),
        key("0", "ⁿ", "∅"),
    )
    .set_keys_of_row(
        2,
        key("@"),
        key("#"),
        key(CURRENCY),
        key("%", "‰"),
        key("&"),
        key("-", "_", "–", "—", "·"),
        key("+", "±"),
        key("(", "<", "{", "["),
        key(")", ">", "}", "]"),
    )
    .set_keys_of_row(
        3,
        key("*", "†", "‡", "★"),
        key(DOUBLE_QUOTE),
        key(SINGLE_QUOTE),
        key(":"),
        key(";"),
        key("!", "¡"),
        key("?", "¿"),
    )
    .set_keys_of_row(4, key(","), key("_"), SPACEBAR, key("/"), key(".", "…"))
    .build()
)

SYMBOLS_SHIFTED_COMMON: Layout = (
    ExpectedKeyboardBuilder()
    .set_keys_of_row(
        1,
        key("~"),
        key("`"),
        key("|"),
        key("•", "♪", "♥", "♠", "♦", "♣"),
        key("√"),
        key("π", "Π"),
        key("÷"),
        key("×"),
        key("¶", "§"),
        key("∆"),
    )
    .set_keys_of_row(
        2,
        key(OTHER_CURRENCIES),
        key("^", "↑", "↓", "←", "→"),
        key("°", "′", "″"),
        key("=", "≠", "≈", "∞"),
        key("{"),
        key("}"),
    )
    .set_keys_of_row(3, key("\\"), key("©"), key("®"), key("™"), key("℅"), key("["), key("]"))
    .set_keys_of_row(4, key("<", "‹", "≤", "«"), key(">", "›", "≥", "»"), SPACEBAR, key(","), key(".", "…"))
    .build()
)


class Symbols:
    """
    The symbols page, parameterized by the currency and quotation mark choices of a customizer.
    """

    def __init__(self, customizer: "LayoutCustomizer") -> None:
        self.customizer = customizer

    def common_builder(self) -> ExpectedKeyboardBuilder:
        customizer = self.customizer
        return (
            ExpectedKeyboardBuilder(SYMBOLS_COMMON)
            .replace_key_of_label(CURRENCY, customizer.currency_key())
            .replace_key_of_label(
                DOUBLE_QUOTE,
                key('"', customizer.double_quote_more_keys(), customizer.double_angle_quote_keys()),
            )
            .replace_key_of_label(
                SINGLE_QUOTE,
                key("'", customizer.single_quote_more_keys(), customizer.single_angle_quote_keys()),
            )
        )

    def get_layout(self, is_phone: bool) -> Layout:
        customizer = self.customizer
        builder = self.common_builder()
        if is_phone:
            builder.add_keys_on_the_left_of_row(3, customizer.symbols_shift_key(is_phone))
            builder.add_keys_on_the_right_of_row(3, DELETE_KEY)
            builder.add_keys_on_the_left_of_row(4, customizer.alphabet_key())
            builder.add_keys_on_the_right_of_row(4, ENTER_AND_EMOJI_KEY)
        else:
            # Tablet has two extra keys at the left edge of the 3rd row.
            builder.add_keys_on_the_left_of_row(3, "\\", "=")
            builder.add_keys_on_the_right_of_row(1, DELETE_KEY)
            builder.add_keys_on_the_right_of_row(2, ENTER_KEY)
            builder.add_keys_on_the_left_of_row(3, customizer.symbols_shift_key(is_phone))
            builder.add_keys_on_the_right_of_row(3, customizer.symbols_shift_key(is_phone))
            builder.add_keys_on_the_left_of_row(4, customizer.alphabet_key())
            builder.add_keys_on_the_right_of_row(4, EMOJI_KEY)
        return builder.build()


class SymbolsShifted:
    """
    The shifted symbols page, its first key is the customizer's list of other currencies.
    """

    def __init__(self, customizer: "LayoutCustomizer") -> None:
        self.customizer = customizer

    def common_builder(self) -> ExpectedKeyboardBuilder:
        return ExpectedKeyboardBuilder(SYMBOLS_SHIFTED_COMMON).replace_key_of_label(
            OTHER_CURRENCIES, self.customizer.other_currency_keys()
        )

    def get_layout(self, is_phone: bool) -> Layout:
        customizer = self.customizer
        builder = self.common_builder()
        if is_phone:
            builder.add_keys_on_the_left_of_row(3, customizer.back_to_symbols_key())
            builder.add_keys_on_the_right_of_row(3, DELETE_KEY)
            builder.add_keys_on_the_left_of_row(4, customizer.alphabet_key())
            builder.add_keys_on_the_right_of_row(4, ENTER_AND_EMOJI_KEY)
        else:
            # Tablet has two extra keys at the right edge of the 3rd row.
            builder.add_keys_on_the_right_of_row(3, "¡", "¿")
            builder.add_keys_on_the_right_of_row(1, DELETE_KEY)
            builder.add_keys_on_the_right_of_row(2, ENTER_KEY)
            builder.add_keys_on_the_left_of_row(3, customizer.back_to_symbols_key())
            builder.add_keys_on_the_right_of_row(3, customizer.back_to_symbols_key())
            builder.add_keys_on_the_left_of_row(4, customizer.alphabet_key())
            builder.add_keys_on_the_right_of_row(4, EMOJI_KEY)
        return builder.build()


# Brackets on right-to-left keyboards show the opening glyph but output the mirrored one.
RTL_PARENTHESES = (
    key("(", more_key("<", ">"), more_key("{", "}"), more_key("[", "]"), output=")"),
    key(")", more_key(">", "<"), more_key("}", "{"), more_key("]", "["), output="("),
)
RTL_ANGLE_BRACKETS = (
    key("<", more_key("‹", "›"), "≤", more_key("«", "»"), output=">"),
    key(">", more_key("›", "‹"), "≥", more_key("»", "«"), output="<"),
)
RTL_BRACES = (more_key("{", "}"), more_key("}", "{"))
RTL_SQUARE_BRACKETS = (more_key("[", "]"), more_key("]", "["))


def _mirror(builder: ExpectedKeyboardBuilder, *pairs: Tuple[ExpectedKey, ExpectedKey]) -> ExpectedKeyboardBuilder:
    for left, right in pairs:
        builder.replace_key_of_label(left.label, left)
        builder.replace_key_of_label(right.label, right)
    return builder


class RtlSymbols(Symbols):
    def common_builder(self) -> ExpectedKeyboardBuilder:
        return _mirror(super().common_builder(), RTL_PARENTHESES)


class RtlSymbolsShifted(SymbolsShifted):
    def common_builder(self) -> ExpectedKeyboardBuilder:
        return _mirror(super().common_builder(), RTL_ANGLE_BRACKETS, RTL_BRACES, RTL_SQUARE_BRACKETS)
