"""Shared constants for cldrplural.

This module provides centralized configuration constants used across
the syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for chained and/or relations
- Cache limits: Memory bounds for the Babel locale cache
- Input limits: DoS prevention via size constraints
- Plural categories: CLDR category names in evaluation order

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Input limits
    "MAX_RULE_LENGTH",
    # Plural categories
    "PLURAL_CATEGORIES",
    "OTHER_CATEGORY",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum recursive-descent depth of a rule's condition.
# Plural rules have no parentheses, so depth is not nesting: every relation
# chained with "and" or "or" opens one more level, and a chain of k
# relations needs k + 1 levels. MAX_DEPTH therefore admits at most
# MAX_DEPTH - 1 chained relations. The longest CLDR rules carry fewer
# than 15.
MAX_DEPTH: int = 100

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum rule length in characters (after sample annotations are removed).
# Real CLDR rules are well under 200 characters.
MAX_RULE_LENGTH: int = 10_000

# ============================================================================
# PLURAL CATEGORIES
# ============================================================================

# Explicit categories in the order they are tried during selection.
# "other" is never listed: it is the fallback when nothing else matches.
PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many")

OTHER_CATEGORY: str = "other"
