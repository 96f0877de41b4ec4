from typing import Tuple

from ..expected import ExpectedKey, ExpectedKeyboardBuilder, join_keys, key
from ..expected.common import (
    ALPHABET_KEY,
    BACK_TO_SYMBOLS_KEY,
    EMPTY_KEYS,
    EXCLAMATION_AND_QUESTION_MARKS,
    PHONE_PUNCTUATION_MORE_KEYS,
    SETTINGS_KEY,
    SHIFT_KEY,
    SYMBOLS_KEY,
    SYMBOLS_SHIFT_KEY,
    TABLET_PUNCTUATION_MORE_KEYS,
    TABLET_SYMBOLS_SHIFT_KEY,
)
from . import symbols

Keys = Tuple[ExpectedKey, ...]


class LayoutCustomizer:
    """
    Customizes the common keyboard layout to a language specific layout.

    Every method is a pure function of its arguments, override them in a subclass to change
    the keys a locale uses.
    """

    def __init__(self, locale: str) -> None:
        self._locale = locale

    @property
    def locale(self) -> str:
        return self._locale

    def set_accented_letters(self, builder: ExpectedKeyboardBuilder) -> ExpectedKeyboardBuilder:
        """
        Attach accented letters to the common layout as "more keys". Must not add or remove
        keys.
        """
        return builder

    def alphabet_key(self) -> ExpectedKey:
        return ALPHABET_KEY

    def symbols_key(self) -> ExpectedKey:
        return SYMBOLS_KEY

    def symbols_shift_key(self, is_phone: bool) -> ExpectedKey:
        return SYMBOLS_SHIFT_KEY if is_phone else TABLET_SYMBOLS_SHIFT_KEY

    def back_to_symbols_key(self) -> ExpectedKey:
        return BACK_TO_SYMBOLS_KEY

    def currency_key(self) -> ExpectedKey:
        return symbols.CURRENCY_DOLLAR

    def other_currency_keys(self) -> Keys:
        return symbols.CURRENCIES_OTHER_THAN_DOLLAR

    def double_quote_more_keys(self) -> Keys:
        return symbols.DOUBLE_QUOTES_9LR

    def single_quote_more_keys(self) -> Keys:
        return symbols.SINGLE_QUOTES_9LR

    def double_angle_quote_keys(self) -> Keys:
        return symbols.DOUBLE_ANGLE_QUOTES_LR

    def single_angle_quote_keys(self) -> Keys:
        return symbols.SINGLE_ANGLE_QUOTES_LR

    def left_shift_keys(self, is_phone: bool) -> Keys:
        return join_keys(SHIFT_KEY)

    def right_shift_keys(self, is_phone: bool) -> Keys:
        return EMPTY_KEYS if is_phone else join_keys(EXCLAMATION_AND_QUESTION_MARKS, SHIFT_KEY)

    def keys_left_of_spacebar(self, is_phone: bool) -> Keys:
        return join_keys(key(",", SETTINGS_KEY)) if is_phone else join_keys("/")

    def keys_right_of_spacebar(self, is_phone: bool) -> Keys:
        period = key(".", self.punctuation_more_keys(is_phone))
        return join_keys(period) if is_phone else join_keys(",", period)

    def punctuation_more_keys(self, is_phone: bool) -> Keys:
        return PHONE_PUNCTUATION_MORE_KEYS if is_phone else TABLET_PUNCTUATION_MORE_KEYS

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._locale!r})"


class EuroLayoutCustomizer(LayoutCustomizer):
    """
    Customizer for countries using the Euro.
    """

    def currency_key(self) -> ExpectedKey:
        return symbols.CURRENCY_EURO

    def other_currency_keys(self) -> Keys:
        return symbols.CURRENCIES_OTHER_THAN_EURO
