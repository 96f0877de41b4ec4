from enum import IntEnum

# Key codes, negative values are function keys.
CODE_TAB = ord("\t")
CODE_ENTER = ord("\n")
CODE_SPACE = ord(" ")
CODE_SHIFT = -1
CODE_CAPSLOCK = -2
CODE_SWITCH_ALPHA_SYMBOL = -3
CODE_OUTPUT_TEXT = -4
CODE_DELETE = -5
CODE_SETTINGS = -6
CODE_SHORTCUT = -7
CODE_LANGUAGE_SWITCH = -10
CODE_EMOJI = -11

# Icon names, resolved to drawables by the keyboard under test.
ICON_SHIFT_KEY = "shift_key"
ICON_SHIFT_KEY_SHIFTED = "shift_key_shifted"
ICON_DELETE_KEY = "delete_key"
ICON_SETTINGS_KEY = "settings_key"
ICON_SPACE_KEY = "space_key"
ICON_ENTER_KEY = "enter_key"
ICON_EMOJI_KEY = "emoji_normal_key"


class ElementId(IntEnum):
    """
    Keyboard element (page) being requested.
    """

    ALPHABET = 0
    ALPHABET_MANUAL_SHIFTED = 1
    ALPHABET_AUTOMATIC_SHIFTED = 2
    ALPHABET_SHIFT_LOCKED = 3
    ALPHABET_SHIFT_LOCK_SHIFTED = 4
    SYMBOLS = 5
    SYMBOLS_SHIFTED = 6
    PHONE = 7
    PHONE_SYMBOLS = 8
    NUMBER = 9


ALPHABET_SHIFTED_ELEMENTS = frozenset(
    (
        ElementId.ALPHABET_MANUAL_SHIFTED,
        ElementId.ALPHABET_AUTOMATIC_SHIFTED,
        ElementId.ALPHABET_SHIFT_LOCKED,
        ElementId.ALPHABET_SHIFT_LOCK_SHIFTED,
    )
)
