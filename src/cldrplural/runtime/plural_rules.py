"""CLDR plural category selection using Babel's locale data.

The rule engine answers one question: does this rule hold for this number?
This module is a caller of the engine: it fetches a locale's rule texts from
Babel and tries them in CLDR order, falling back to "other".

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from cldrplural.constants import OTHER_CATEGORY, PLURAL_CATEGORIES
from cldrplural.diagnostics.templates import ErrorTemplate
from cldrplural.locale_utils import get_babel_locale
from cldrplural.runtime.evaluator import evaluate_rule

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cldrplural.runtime.operands import PluralNumber

__all__ = ["get_plural_rules", "select_from_rules", "select_plural_category"]

logger = logging.getLogger(__name__)


def get_plural_rules(locale: str) -> dict[str, str]:
    """Return a locale's cardinal plural rules as rule texts.

    Args:
        locale: Locale code (e.g., "lv_LV", "en-US", "ar")

    Returns:
        Mapping of category to rule text, in CLDR category order. "other"
        is never present. Unknown locales yield an empty mapping (CLDR root:
        every number is "other").

    Example:
        >>> get_plural_rules("en")
        {'one': 'i in 1 and v in 0'}
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning("%s: %s. Using CLDR root rules", ErrorTemplate.locale_unknown(locale), e)
        return {}

    # Babel re-serializes its parsed rules in the classic keyword syntax
    # ("is", "in", "within", "mod"), which this engine reads directly.
    rules = locale_obj.plural_form.rules
    return {category: rules[category] for category in PLURAL_CATEGORIES if category in rules}


def select_from_rules(rules: Mapping[str, str], number: PluralNumber) -> str:
    """Select the plural category of a number from explicit rule texts.

    Categories are tried in CLDR order (zero, one, two, few, many); the
    first rule that holds wins. If none holds, the result is "other".

    Args:
        rules: Mapping of category to rule text
        number: Number to categorize

    Returns:
        Plural category name

    Raises:
        PluralRuleSyntaxError: A rule that had to be tried did not parse

    Example:
        >>> select_from_rules({"one": "n is 1", "few": "n in 2..4"}, 3)
        'few'
    """
    for category in PLURAL_CATEGORIES:
        rule = rules.get(category)
        if rule is not None and evaluate_rule(rule, number):
            return category
    return OTHER_CATEGORY


def select_plural_category(number: PluralNumber, locale: str) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        number: Number to categorize. Pass Decimal or str to keep visible
            trailing zeros ("1.0" is "other" in English, 1 is "one").
        locale: Locale code (e.g., "lv_LV", "en_US", "ar-SA")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(5, "ru_RU")
        'many'
        >>> select_plural_category(2, "ar_SA")
        'two'
        >>> select_plural_category(42, "ja_JP")
        'other'
    """
    return select_from_rules(get_plural_rules(locale), number)
