"""Rule-based spending classification.

Each rule is a keyword set and a category. Rules are evaluated in table
order against the lowercased description and the first match wins, so the
order of ``DEFAULT_RULES`` is part of the behaviour: narrow merchant rules
that should beat the broad money-transfer rule must come before it.

The paybill rule is an umbrella. Its refinements (power, water, TV,
internet) are only consulted for paybill descriptions, and when none of them
matches evaluation falls through to the remaining rules, since there is no
generic paybill category. Set ``fallback_category`` on the umbrella to keep
such descriptions in a bucket of their own instead.
"""

import json
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence

from pesatrack.domain.entities import CATEGORY_OTHER, ClassificationRule
from pesatrack.domain.errors import ValidationError


def rule(
    category: Optional[str],
    *keywords: str,
    refinements: Sequence[ClassificationRule] = (),
    fallback_category: Optional[str] = None,
) -> ClassificationRule:
    """Shorthand for building a rule with lowercased keywords."""
    return ClassificationRule(
        keywords=tuple(keyword.lower() for keyword in keywords),
        category=category,
        refinements=tuple(refinements),
        fallback_category=fallback_category,
    )


PAYBILL_RULE = rule(
    None,
    "paybill",
    "pbl",
    refinements=(
        rule("Electricity", "kplc", "power", "electricity"),
        rule("Water", "water", "nwsc"),
        rule("TV Subscription", "tv", "gotv", "startimes", "dstv"),
        rule("Internet", "internet", "safaricom", "wifi"),
    ),
)

DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    rule("Airtime", "airtime", "fuliza"),
    PAYBILL_RULE,
    rule("Money Transfer", "send money", "sent to", "to"),
    rule("Cash Withdrawal", "withdraw", "atm"),
    rule("Online Shopping", "jumia", "amazon", "ebay", "alibaba"),
    rule("Groceries", "supermarket", "nakumatt", "tuskys", "naivas", "carrefour"),
    rule("Dining", "restaurant", "cafe", "food", "kfc", "java"),
    rule("Transport", "uber", "taxi", "bolt", "matatu", "bus"),
    rule("Accommodation", "hotel", "lodging", "accommodation"),
    rule("Healthcare", "hospital", "clinic", "medical", "pharmacy"),
    rule("Education", "school", "fee", "education", "university"),
)


def match_rules(text: str, rules: Iterable[ClassificationRule]) -> Optional[str]:
    """Return the category of the first matching rule, or None.

    ``text`` must already be lowercased.
    """
    for candidate in rules:
        if not candidate.matches(text):
            continue
        if candidate.refinements:
            refined = match_rules(text, candidate.refinements)
            if refined is not None:
                return refined
            if candidate.fallback_category is not None:
                return candidate.fallback_category
            continue
        if candidate.category is not None:
            return candidate.category
    return None


class Classifier:
    """Maps descriptions to categories using an ordered rule table.

    Instances hold only an immutable tuple of rules, so one classifier can be
    shared across threads.
    """

    def __init__(
        self,
        rules: Sequence[ClassificationRule] = DEFAULT_RULES,
        default_category: str = CATEGORY_OTHER,
    ):
        self.rules = tuple(rules)
        self.default_category = default_category

    def classify(self, description: str) -> str:
        """Return the category for a description."""
        category = match_rules((description or "").lower(), self.rules)
        return category if category is not None else self.default_category


_default_classifier = Classifier()


def classify(description: str) -> str:
    """Classify a description with the default rule table."""
    return _default_classifier.classify(description)


def rules_from_data(data: Any) -> tuple[ClassificationRule, ...]:
    """Build a rule table from decoded JSON.

    Expects a list of objects with ``category`` and ``keywords`` and the
    optional ``refinements`` (same shape) and ``fallback_category``. An
    umbrella rule with refinements has no ``category`` of its own.

    Raises:
        ValidationError: If the data does not have that shape
    """
    if not isinstance(data, list):
        raise ValidationError("Rule table must be a list of rules")

    rules = []
    for index, item in enumerate(data, start=1):
        if not isinstance(item, dict):
            raise ValidationError(f"Rule {index} must be an object")

        keywords = item.get("keywords")
        if (
            not isinstance(keywords, list)
            or not keywords
            or not all(isinstance(k, str) and k.strip() for k in keywords)
        ):
            raise ValidationError(f"Rule {index} needs a non-empty list of keywords")

        refinements = rules_from_data(item["refinements"]) if "refinements" in item else ()
        category = item.get("category")
        if category is None and not refinements:
            raise ValidationError(f"Rule {index} needs a category or refinements")
        if category is not None and refinements:
            raise ValidationError(
                f"Rule {index} has refinements; use fallback_category instead of category"
            )
        if category is not None and not isinstance(category, str):
            raise ValidationError(f"Rule {index} category must be a string")

        rules.append(
            rule(
                category,
                *(k.strip() for k in keywords),
                refinements=refinements,
                fallback_category=item.get("fallback_category"),
            )
        )
    return tuple(rules)


def load_rules(path: str) -> tuple[ClassificationRule, ...]:
    """Load a rule table from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the file is not valid JSON or not a rule table
    """
    rules_path = Path(path)
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")
    try:
        data = json.loads(rules_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValidationError(f"Rules file '{path}' is not valid JSON: {e}")
    return rules_from_data(data)
