from .labels import BankLabel
from .rules import FieldKind, Rule, rule
from .profiles import BankProfile, PatternLibrary, DEFAULT_LIBRARY, build_default_library

__all__ = [
    "BankLabel",
    "FieldKind",
    "Rule",
    "rule",
    "BankProfile",
    "PatternLibrary",
    "DEFAULT_LIBRARY",
    "build_default_library",
]
