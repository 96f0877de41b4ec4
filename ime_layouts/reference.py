"""
Reference data export.

Layouts are converted to plain lists and dicts so they can be stored as YAML next to the
tests comparing them against a rendered keyboard:

    - - label: q
        output: 113
        more_keys:
        - label: '1'
          output: 49
"""

from typing import Any, Dict, List, Optional, TextIO

import yaml

from .constants import ElementId
from .expected import ExpectedKey, Layout
from .layout.layout_base import LayoutBase

FORM_FACTORS = {"phone": True, "tablet": False}


def key_to_data(key: ExpectedKey) -> Dict[str, Any]:
    data: Dict[str, Any] = {"label": key.label} if key.label is not None else {"icon": key.icon}
    data["output"] = key.output
    if key.more_keys:
        data["more_keys"] = [key_to_data(k) for k in key.more_keys]
    return data


def key_from_data(data: Dict[str, Any]) -> ExpectedKey:
    return ExpectedKey(
        label=data.get("label"),
        icon=data.get("icon"),
        output=data["output"],
        more_keys=tuple(key_from_data(k) for k in data.get("more_keys", ())),
    )


def layout_to_data(layout: Layout) -> List[List[Dict[str, Any]]]:
    return [[key_to_data(k) for k in row] for row in layout]


def layout_from_data(data: List[List[Dict[str, Any]]]) -> Layout:
    return tuple(tuple(key_from_data(k) for k in row) for row in data)


def dump_layout(layout: Layout, stream: Optional[TextIO] = None) -> Optional[str]:
    return yaml.safe_dump(layout_to_data(layout), stream, allow_unicode=True, sort_keys=False)


def load_layout(content: str) -> Layout:
    return layout_from_data(yaml.safe_load(content))


def reference_data(layout_base: LayoutBase) -> Dict[str, Any]:
    """
    Every page of `layout_base` for both form factors, pages the layout doesn't have are None.
    """
    data: Dict[str, Any] = {"name": layout_base.name, "locale": layout_base.locale}
    for form_factor, is_phone in FORM_FACTORS.items():
        pages = {}
        for element_id in ElementId:
            layout = layout_base.get_layout(is_phone, element_id)
            pages[element_id.name.lower()] = None if layout is None else layout_to_data(layout)
        data[form_factor] = pages
    return data


def dump_reference(layout_base: LayoutBase, stream: Optional[TextIO] = None) -> Optional[str]:
    return yaml.safe_dump(reference_data(layout_base), stream, allow_unicode=True, sort_keys=False)
