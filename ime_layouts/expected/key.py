from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple, Union

from ..constants import CODE_OUTPUT_TEXT

Output = Union[int, str]
KeysSpec = Union["ExpectedKey", str, Iterable["KeysSpec"]]

# Languages whose dotted "i" upper-cases to U+0130 "İ".
TURKIC_LANGUAGES = frozenset(("tr", "az"))


def to_upper(text: str, locale: str) -> str:
    if locale.split("_")[0] in TURKIC_LANGUAGES:
        text = text.replace("i", "İ")
    return text.upper()


def _output_of(label: str) -> Output:
    return ord(label) if len(label) == 1 else label


@dataclass(frozen=True)
class ExpectedKey:
    """
    A key as it is expected to appear on the keyboard: a visual (label or icon name), the
    output it produces (a code or a text) and its "more keys" in display order.
    """

    label: Optional[str] = None
    icon: Optional[str] = None
    output: Output = CODE_OUTPUT_TEXT
    more_keys: Tuple["ExpectedKey", ...] = ()

    @property
    def visual(self) -> str:
        return self.label if self.label is not None else f"!icon/{self.icon}"

    def with_more_keys(self, *more_keys: KeysSpec) -> "ExpectedKey":
        return replace(self, more_keys=(*self.more_keys, *join_keys(*more_keys)))

    def to_upper_case(self, locale: str) -> "ExpectedKey":
        more_keys = tuple(k.to_upper_case(locale) for k in self.more_keys)
        if self.label is None:
            return replace(self, more_keys=more_keys)

        label = to_upper(self.label, locale)
        output = self.output
        if isinstance(output, str):
            output = to_upper(output, locale)
        elif output == _output_of(self.label):
            output = _output_of(label)
        return replace(self, label=label, output=output, more_keys=more_keys)

    def __str__(self) -> str:
        if not self.more_keys:
            return self.visual
        return f"{self.visual}^{{{','.join(str(k) for k in self.more_keys)}}}"


def key(visual: Union[str, ExpectedKey], *more_keys: KeysSpec, output: Optional[Output] = None) -> ExpectedKey:
    """
    Create a label key, or extend `visual` if it already is a key.

    >>> key("e", "3", "é")
    >>> key("(", output=")")
    """
    if isinstance(visual, ExpectedKey):
        return visual.with_more_keys(*more_keys)
    return ExpectedKey(label=visual, output=_output_of(visual) if output is None else output).with_more_keys(
        *more_keys
    )


def icon_key(icon: str, code: int, *more_keys: KeysSpec) -> ExpectedKey:
    return ExpectedKey(icon=icon, output=code).with_more_keys(*more_keys)


def more_key(label: str, output: Optional[Output] = None) -> ExpectedKey:
    return key(label, output=output)


def join_keys(*keys: KeysSpec) -> Tuple[ExpectedKey, ...]:
    """
    Flatten keys, labels and (nested) sequences of them into a tuple of keys.
    """
    joined = []
    for k in keys:
        if isinstance(k, ExpectedKey):
            joined.append(k)
        elif isinstance(k, str):
            joined.append(key(k))
        else:
            joined.extend(join_keys(*k))
    return tuple(joined)
