from .customizer import EuroLayoutCustomizer, LayoutCustomizer
from .layout_base import LayoutBase, LayoutConfigurationError
from .symbols import RtlSymbols, RtlSymbolsShifted, Symbols, SymbolsShifted

__all__ = [
    "EuroLayoutCustomizer",
    "LayoutBase",
    "LayoutConfigurationError",
    "LayoutCustomizer",
    "RtlSymbols",
    "RtlSymbolsShifted",
    "Symbols",
    "SymbolsShifted",
]
