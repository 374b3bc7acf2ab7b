"""Token extraction from compact formula strings."""

import re
from typing import List

ELEMENT_PATTERN = re.compile(r"[A-Z][a-z]?")


def tokenize_formula(formula: str) -> List[str]:
    """
    Extract element symbols from a formula-like string.

    One uppercase letter optionally followed by one lowercase letter makes a
    token; every other character is skipped.

    Args:
        formula: Formula text, not necessarily valid

    Returns:
        Element symbols in order of appearance (possibly empty)
    """
    if not formula:
        return []
    return ELEMENT_PATTERN.findall(formula)


def count_pattern(text: str, pattern: str) -> int:
    """Number of non-overlapping regex matches of ``pattern`` in ``text``."""
    if not text:
        return 0
    return len(re.findall(pattern, text))


def has_double_bond(formula: str) -> bool:
    # Global flag: one '=' anywhere marks every bond as double.
    return bool(formula) and "=" in formula
