from .builder import ExpectedKeyboardBuilder, Layout
from .key import ExpectedKey, icon_key, join_keys, key, more_key

__all__ = ["ExpectedKey", "ExpectedKeyboardBuilder", "Layout", "icon_key", "join_keys", "key", "more_key"]
