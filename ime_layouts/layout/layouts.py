from typing import Iterable, Optional, Tuple

from ..constants import ElementId
from ..expected import ExpectedKey, ExpectedKeyboardBuilder, Layout, join_keys, key, more_key
from ..expected.common import EMPTY_KEYS, EXCLAMATION_AND_QUESTION_MARKS
from . import symbols
from .customizer import EuroLayoutCustomizer, Keys, LayoutCustomizer
from .layout_base import LayoutBase
from .symbols import RtlSymbols, RtlSymbolsShifted


def digit_hinted(letters: Iterable[str]) -> Tuple[ExpectedKey, ...]:
    """Top row letters carrying the digits 1 to 0 as their more key."""
    return tuple(key(letter, str((i + 1) % 10)) for i, letter in enumerate(letters))


QWERTY_COMMON: Layout = (
    ExpectedKeyboardBuilder()
    .set_keys_of_row(1, digit_hinted("qwertyuiop"))
    .set_keys_of_row(2, *"asdfghjkl")
    .set_keys_of_row(3, *"zxcvbnm")
    .build()
)

QWERTZ_COMMON: Layout = (
    ExpectedKeyboardBuilder()
    .set_keys_of_row(1, digit_hinted("qwertzuiop"), "ü")
    .set_keys_of_row(2, *"asdfghjkl", "ö", "ä")
    .set_keys_of_row(3, *"yxcvbnm")
    .build()
)

AZERTY_COMMON: Layout = (
    ExpectedKeyboardBuilder()
    .set_keys_of_row(1, digit_hinted("azertyuiop"))
    .set_keys_of_row(2, *"qsdfghjklm")
    .set_keys_of_row(3, *"wxcvbn", key("'", "‘", "’", "‚", "‹", "›"))
    .build()
)

SPANISH_COMMON: Layout = ExpectedKeyboardBuilder(QWERTY_COMMON).add_keys_on_the_right_of_row(2, "ñ").build()

HEBREW_COMMON: Layout = (
    ExpectedKeyboardBuilder()
    # U+05F3 "׳" HEBREW PUNCTUATION GERESH, U+05F4 "״" HEBREW PUNCTUATION GERSHAYIM
    # U+05BE "־" HEBREW PUNCTUATION MAQAF
    .set_keys_of_row(1, key("'", "׳", '"', "״"), key("-", "־", "_"), *"קראטוןםפ")
    .set_keys_of_row(2, *"שדגכעיחלךף")
    .set_keys_of_row(3, *"זסבהנמצתץ")
    .build()
)


class EnglishCustomizer(LayoutCustomizer):
    def set_accented_letters(self, builder: ExpectedKeyboardBuilder) -> ExpectedKeyboardBuilder:
        return (
            builder.add_more_keys_of("e", "é", "è", "ê", "ë", "ē")
            .add_more_keys_of("u", "û", "ü", "ù", "ú", "ū")
            .add_more_keys_of("i", "î", "ï", "í", "ī", "ì")
            .add_more_keys_of("o", "ô", "ö", "ò", "ó", "œ", "ø", "ō", "õ")
            .add_more_keys_of("a", "à", "á", "â", "ä", "æ", "ã", "å", "ā")
            .add_more_keys_of("s", "ß")
            .add_more_keys_of("c", "ç")
            .add_more_keys_of("n", "ñ")
        )


class GermanCustomizer(EuroLayoutCustomizer):
    def double_quote_more_keys(self) -> Keys:
        return symbols.DOUBLE_QUOTES_R9L

    def single_quote_more_keys(self) -> Keys:
        return symbols.SINGLE_QUOTES_R9L

    def double_angle_quote_keys(self) -> Keys:
        return symbols.DOUBLE_ANGLE_QUOTES_RL

    def single_angle_quote_keys(self) -> Keys:
        return symbols.SINGLE_ANGLE_QUOTES_RL

    def set_accented_letters(self, builder: ExpectedKeyboardBuilder) -> ExpectedKeyboardBuilder:
        return (
            builder.add_more_keys_of("e", "é", "è", "ê", "ë", "ė")
            .add_more_keys_of("u", "û", "ù", "ú", "ū")
            .add_more_keys_of("o", "ô", "ò", "ó", "õ", "œ", "ø", "ō")
            .add_more_keys_of("a", "à", "á", "â", "æ", "ã", "å", "ā")
            .add_more_keys_of("s", "ß", "ś", "š")
            .add_more_keys_of("n", "ñ", "ń")
        )


class FrenchCustomizer(EuroLayoutCustomizer):
    def set_accented_letters(self, builder: ExpectedKeyboardBuilder) -> ExpectedKeyboardBuilder:
        return (
            builder.add_more_keys_of("a", "à", "â", "æ", "á", "ä", "ã", "å", "ā", "ª")
            .add_more_keys_of("e", "é", "è", "ê", "ë", "ę", "ė", "ē")
            .add_more_keys_of("y", "ÿ")
            .add_more_keys_of("u", "ù", "û", "ü", "ú", "ū")
            .add_more_keys_of("i", "î", "ï", "ì", "í", "į", "ī")
            .add_more_keys_of("o", "ô", "œ", "ö", "ò", "ó", "õ", "ø", "ō", "º")
            .add_more_keys_of("c", "ç", "ć", "č")
        )


# Spanish punctuation adds the inverted marks next to their upright forms.
SPANISH_PHONE_PUNCTUATION_MORE_KEYS = join_keys(
    ";", "/", "(", ")", "#", "!", "¡", ",", "?", "¿", "&", "%", "+", '"', "-", ":", "'", "@"
)
SPANISH_TABLET_PUNCTUATION_MORE_KEYS = join_keys(
    ";", "/", "(", ")", "#", "¡", ",", "¿", "&", "%", "+", '"', "-", ":", "'", "@"
)


class SpanishCustomizer(EuroLayoutCustomizer):
    def punctuation_more_keys(self, is_phone: bool) -> Keys:
        return SPANISH_PHONE_PUNCTUATION_MORE_KEYS if is_phone else SPANISH_TABLET_PUNCTUATION_MORE_KEYS

    def set_accented_letters(self, builder: ExpectedKeyboardBuilder) -> ExpectedKeyboardBuilder:
        return (
            builder.add_more_keys_of("a", "á", "à", "ä", "â", "ã", "å", "ą", "æ", "ā", "ª")
            .add_more_keys_of("e", "é", "è", "ë", "ê", "ę", "ė", "ē")
            .add_more_keys_of("i", "í", "ï", "ì", "î", "į", "ī")
            .add_more_keys_of("o", "ó", "ò", "ö", "ô", "õ", "ø", "œ", "ō", "º")
            .add_more_keys_of("u", "ú", "ü", "ù", "û", "ū")
            .add_more_keys_of("c", "ç")
        )


# U+20BA "₺" TURKISH LIRA SIGN
CURRENCY_LIRA = key("₺", symbols.CURRENCY_GENERIC_MORE_KEYS)


class TurkishCustomizer(LayoutCustomizer):
    def currency_key(self) -> ExpectedKey:
        return CURRENCY_LIRA

    def other_currency_keys(self) -> Keys:
        return symbols.CURRENCIES_OTHER_GENERIC

    def set_accented_letters(self, builder: ExpectedKeyboardBuilder) -> ExpectedKeyboardBuilder:
        return (
            builder.add_more_keys_of("i", "ı", "î", "ï", "ì", "í", "į", "ī")
            .add_more_keys_of("o", "ö", "ô", "œ", "ò", "ó", "õ", "ø", "ō")
            .add_more_keys_of("u", "ü", "û", "ù", "ú", "ū")
            .add_more_keys_of("s", "ş", "ß", "ś", "š")
            .add_more_keys_of("c", "ç", "ć", "č")
            .add_more_keys_of("g", "ğ")
        )


# U+20AA "₪" NEW SHEQEL SIGN
CURRENCY_NEW_SHEQEL = key("₪", symbols.CURRENCY_GENERIC_MORE_KEYS)
RTL_PHONE_PUNCTUATION_MORE_KEYS = join_keys(
    ";", "/", more_key("(", ")"), more_key(")", "("), "#", "!", ",", "?", "&", "%", "+", '"', "-", ":", "'", "@"
)
RTL_TABLET_PUNCTUATION_MORE_KEYS = join_keys(
    ";", "/", more_key("(", ")"), more_key(")", "("), "#", "'", ",", "&", "%", "+", '"', "-", ":", "@"
)


class HebrewCustomizer(LayoutCustomizer):
    """
    Hebrew has no letter case, so its keyboards have no shift key.
    """

    def currency_key(self) -> ExpectedKey:
        return CURRENCY_NEW_SHEQEL

    def other_currency_keys(self) -> Keys:
        return symbols.CURRENCIES_OTHER_GENERIC

    def double_quote_more_keys(self) -> Keys:
        return symbols.DOUBLE_QUOTES_LR9

    def single_quote_more_keys(self) -> Keys:
        return symbols.SINGLE_QUOTES_LR9

    def double_angle_quote_keys(self) -> Keys:
        return symbols.DOUBLE_ANGLE_QUOTES_LR_RTL

    def single_angle_quote_keys(self) -> Keys:
        return symbols.SINGLE_ANGLE_QUOTES_LR_RTL

    def left_shift_keys(self, is_phone: bool) -> Keys:
        return EMPTY_KEYS

    def right_shift_keys(self, is_phone: bool) -> Keys:
        return EMPTY_KEYS if is_phone else EXCLAMATION_AND_QUESTION_MARKS

    def punctuation_more_keys(self, is_phone: bool) -> Keys:
        return RTL_PHONE_PUNCTUATION_MORE_KEYS if is_phone else RTL_TABLET_PUNCTUATION_MORE_KEYS


class Qwerty(LayoutBase):
    name = "qwerty"

    def get_common_alphabet_layout(self, is_phone: bool) -> Layout:
        return QWERTY_COMMON


class Qwertz(LayoutBase):
    name = "qwertz"

    def get_common_alphabet_layout(self, is_phone: bool) -> Layout:
        return QWERTZ_COMMON


class Azerty(LayoutBase):
    name = "azerty"

    def get_common_alphabet_layout(self, is_phone: bool) -> Layout:
        return AZERTY_COMMON


class Spanish(LayoutBase):
    name = "spanish"

    def get_common_alphabet_layout(self, is_phone: bool) -> Layout:
        return SPANISH_COMMON


class Hebrew(LayoutBase):
    name = "hebrew"

    def __init__(self, customizer: LayoutCustomizer) -> None:
        super().__init__(customizer, RtlSymbols, RtlSymbolsShifted)

    def get_common_alphabet_layout(self, is_phone: bool) -> Layout:
        return HEBREW_COMMON

    def get_common_alphabet_shift_layout(self, is_phone: bool, element_id: ElementId) -> Optional[Layout]:
        return None
