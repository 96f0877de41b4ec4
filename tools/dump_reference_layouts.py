#!/usr/bin/env python3
import logging
import os
import sys
from pathlib import Path

from ime_layouts import REFERENCE_DIR
from ime_layouts.reference import dump_reference
from ime_layouts.registry import get_layout_for_locale, selected_locales


def show_help() -> None:
    print(
        f"""
Usage: {os.path.basename(__file__)} [ARGS] [LOCALES...]

Writes the expected layouts of each locale to <DIR>/<locale>.yaml.

Args:
    -h, --help      show this help text
    --dir DIR       output directory, defaults to $IME_LAYOUTS_REFERENCE_DIR or ./reference
    -v, --verbose   log every composed layout

Locales default to $IME_LAYOUTS_LOCALES, or all registered locales.
"""
    )


def main(args) -> int:
    output_dir = REFERENCE_DIR
    locales = []
    while args:
        arg = args.pop(0)
        if arg in ("-h", "--help"):
            show_help()
            return 0
        elif arg == "--dir":
            if not args:
                print("--dir requires an argument", file=sys.stderr)
                return 1
            output_dir = Path(args.pop(0))
        elif arg in ("-v", "--verbose"):
            logging.basicConfig(level=logging.DEBUG)
        else:
            locales.append(arg)

    output_dir.mkdir(parents=True, exist_ok=True)
    for locale in locales or selected_locales():
        try:
            layout = get_layout_for_locale(locale)
        except KeyError as ex:
            print(ex.args[0], file=sys.stderr)
            return 1
        path = output_dir / f"{locale}.yaml"
        with open(path, "w", encoding="utf-8") as f:
            dump_reference(layout, f)
        print(f"{locale}: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
