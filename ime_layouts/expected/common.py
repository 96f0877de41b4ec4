from .. import constants
from .key import icon_key, join_keys, key, more_key

SPACEBAR = icon_key(constants.ICON_SPACE_KEY, constants.CODE_SPACE)
DELETE_KEY = icon_key(constants.ICON_DELETE_KEY, constants.CODE_DELETE)
SETTINGS_KEY = icon_key(constants.ICON_SETTINGS_KEY, constants.CODE_SETTINGS)
ENTER_KEY = icon_key(constants.ICON_ENTER_KEY, constants.CODE_ENTER)
EMOJI_KEY = icon_key(constants.ICON_EMOJI_KEY, constants.CODE_EMOJI)
ENTER_AND_EMOJI_KEY = key(ENTER_KEY, EMOJI_KEY)

CAPSLOCK_MORE_KEY = more_key(" ", constants.CODE_CAPSLOCK)
SHIFT_KEY = icon_key(constants.ICON_SHIFT_KEY, constants.CODE_SHIFT, CAPSLOCK_MORE_KEY)
SHIFTED_SHIFT_KEY = icon_key(constants.ICON_SHIFT_KEY_SHIFTED, constants.CODE_SHIFT, CAPSLOCK_MORE_KEY)
ALPHABET_KEY = more_key("ABC", constants.CODE_SWITCH_ALPHA_SYMBOL)
SYMBOLS_KEY = more_key("?123", constants.CODE_SWITCH_ALPHA_SYMBOL)
BACK_TO_SYMBOLS_KEY = more_key("?123", constants.CODE_SHIFT)
SYMBOLS_SHIFT_KEY = more_key("= \\ <", constants.CODE_SHIFT)
TABLET_SYMBOLS_SHIFT_KEY = more_key("~ [ <", constants.CODE_SHIFT)

EMPTY_KEYS = join_keys()

# U+00A1 "¡" INVERTED EXCLAMATION MARK, U+00BF "¿" INVERTED QUESTION MARK
EXCLAMATION_AND_QUESTION_MARKS = join_keys(key("!", "¡"), key("?", "¿"))

PHONE_PUNCTUATION_MORE_KEYS = join_keys(
    ";", "/", "(", ")", "#", "!", ",", "?", "&", "%", "+", '"', "-", ":", "'", "@"
)
TABLET_PUNCTUATION_MORE_KEYS = join_keys(";", "/", "(", ")", "#", "'", ",", "&", "%", "+", '"', "-", ":", "@")
