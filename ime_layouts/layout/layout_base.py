import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from ..constants import ALPHABET_SHIFTED_ELEMENTS, ElementId
from ..expected import ExpectedKeyboardBuilder, Layout
from ..expected.common import (
    DELETE_KEY,
    EMOJI_KEY,
    ENTER_AND_EMOJI_KEY,
    ENTER_KEY,
    SETTINGS_KEY,
    SHIFT_KEY,
    SHIFTED_SHIFT_KEY,
    SPACEBAR,
)
from .customizer import LayoutCustomizer
from .symbols import Symbols, SymbolsShifted

logger = logging.getLogger(__name__)

SymbolsFactory = Callable[[LayoutCustomizer], Symbols]
SymbolsShiftedFactory = Callable[[LayoutCustomizer], SymbolsShifted]

SPACEBAR_ROW = 4
SHIFT_ROW = 3


class LayoutConfigurationError(RuntimeError):
    pass


class LayoutBase(ABC):
    """
    Base class of the expected keyboard layouts.

    A layout owns its customizer and the symbol tables built from it, none of them change
    after construction so the layouts can be requested any number of times.
    """

    def __init__(
        self,
        customizer: LayoutCustomizer,
        symbols_factory: SymbolsFactory = Symbols,
        symbols_shifted_factory: SymbolsShiftedFactory = SymbolsShifted,
    ) -> None:
        self._customizer = customizer
        try:
            self._symbols = symbols_factory(customizer)
            self._symbols_shifted = symbols_shifted_factory(customizer)
        except Exception as ex:
            raise LayoutConfigurationError(f"Unable to build symbol tables for {customizer!r}") from ex

        if not isinstance(self._symbols, Symbols) or not isinstance(self._symbols_shifted, SymbolsShifted):
            raise LayoutConfigurationError(
                f"Unknown symbol tables for {customizer!r}: "
                f"{type(self._symbols).__name__}, {type(self._symbols_shifted).__name__}"
            )
        if self._symbols.customizer is not customizer or self._symbols_shifted.customizer is not customizer:
            raise LayoutConfigurationError(f"Symbol tables are bound to another customizer than {customizer!r}")

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @property
    def locale(self) -> str:
        return self._customizer.locale

    @property
    def customizer(self) -> LayoutCustomizer:
        return self._customizer

    @property
    def symbols(self) -> Symbols:
        return self._symbols

    @property
    def symbols_shifted(self) -> SymbolsShifted:
        return self._symbols_shifted

    @abstractmethod
    def get_common_alphabet_layout(self, is_phone: bool) -> Layout:
        """
        The letter rows of the alphabet layout, without any function keys.
        """
        raise NotImplementedError

    def get_common_alphabet_shift_layout(self, is_phone: bool, element_id: ElementId) -> Optional[Layout]:
        """
        The letter rows of a shifted alphabet layout, or None when `element_id` has no shifted
        variant.
        """
        if element_id not in ALPHABET_SHIFTED_ELEMENTS:
            return None
        builder = ExpectedKeyboardBuilder(self.get_common_alphabet_layout(is_phone))
        builder = self._customizer.set_accented_letters(builder)
        return builder.to_upper_case(self.locale).build()

    def convert_common_layout_to_keyboard(
        self, builder: ExpectedKeyboardBuilder, is_phone: bool
    ) -> ExpectedKeyboardBuilder:
        """
        Add the function keys shared by every language to the common layout in `builder`.
        """
        customizer = self._customizer
        builder.set_keys_of_row(
            SPACEBAR_ROW,
            customizer.keys_left_of_spacebar(is_phone),
            SPACEBAR,
            customizer.keys_right_of_spacebar(is_phone),
        )
        if is_phone:
            builder.add_keys_on_the_right_of_row(SHIFT_ROW, DELETE_KEY)
            builder.add_keys_on_the_left_of_row(SPACEBAR_ROW, customizer.symbols_key())
            builder.add_keys_on_the_right_of_row(SPACEBAR_ROW, ENTER_AND_EMOJI_KEY)
        else:
            builder.add_keys_on_the_right_of_row(1, DELETE_KEY)
            builder.add_keys_on_the_right_of_row(2, ENTER_KEY)
            builder.add_keys_on_the_left_of_row(SPACEBAR_ROW, customizer.symbols_key(), SETTINGS_KEY)
            builder.add_keys_on_the_right_of_row(SPACEBAR_ROW, EMOJI_KEY)
        builder.add_keys_on_the_left_of_row(SHIFT_ROW, customizer.left_shift_keys(is_phone))
        builder.add_keys_on_the_right_of_row(SHIFT_ROW, customizer.right_shift_keys(is_phone))
        return builder

    def get_layout(self, is_phone: bool, element_id: ElementId) -> Optional[Layout]:
        """
        The complete expected keyboard for `element_id`, or None if this layout has none.
        """
        form_factor = "phone" if is_phone else "tablet"
        logger.debug("Composing %s %s for %s", self.name, ElementId(element_id).name, form_factor)
        if element_id == ElementId.SYMBOLS:
            return self._symbols.get_layout(is_phone)
        if element_id == ElementId.SYMBOLS_SHIFTED:
            return self._symbols_shifted.get_layout(is_phone)

        if element_id == ElementId.ALPHABET:
            builder = ExpectedKeyboardBuilder(self.get_common_alphabet_layout(is_phone))
            builder = self._customizer.set_accented_letters(builder)
        else:
            common_layout = self.get_common_alphabet_shift_layout(is_phone, element_id)
            if common_layout is None:
                logger.debug("%s has no layout for %s", self.name, ElementId(element_id).name)
                return None
            builder = ExpectedKeyboardBuilder(common_layout)

        self.convert_common_layout_to_keyboard(builder, is_phone)
        if element_id != ElementId.ALPHABET:
            builder.replace_keys_of_all(SHIFT_KEY, SHIFTED_SHIFT_KEY)
        return builder.build()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._customizer!r})"
