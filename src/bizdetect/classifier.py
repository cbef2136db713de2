"""Summary: Business category classification for map markers.

Importance: Assigns every marker a category, icon, and color without user input.
Alternatives: Use an LLM-based classifier or a places API lookup.

Rules run in a fixed order and the first rule that matches wins:
obvious patterns, dictionary containment, fuzzy dictionary match,
keyword patterns, then partial business name tokens.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from bizdetect.business_dictionary import BUSINESS_LOOKUP, KNOWN_BUSINESSES
from bizdetect.categories import OTHER_CATEGORY_ID, get_category_by_id, other_category
from bizdetect.keyword_patterns import KEYWORD_PATTERNS, OBVIOUS_PATTERNS
from bizdetect.models import ClassificationResult, DictionaryEntry
from bizdetect.text import calculate_similarity, normalize_text


UNKNOWN_TERM = "unknown"


@dataclass(frozen=True)
class BusinessClassifier:
    """Summary: Staged rule-based business classifier.

    Importance: Offers deterministic, fast categorization with no I/O.
    Alternatives: Train a supervised text classifier on labelled markers.
    """

    fuzzy_threshold: float = 0.7
    partial_match_discount: float = 0.8
    partial_token_min_length: int = 3

    def classify(self, name: str | None, address: str | None = None) -> ClassificationResult:
        """Summary: Classify a marker from its name and optional address.

        Importance: Single entry point used by marker creation and bulk import.
        Alternatives: Require users to pick a category for each marker.
        """

        normalized_name = normalize_text(name)
        full_text = f"{normalized_name} {normalize_text(address)}".strip()

        for obvious in OBVIOUS_PATTERNS:
            if obvious.pattern in full_text:
                return _result(obvious.category_id, obvious.confidence, obvious.pattern)

        # An empty name is contained in every key and resolves to the first entry.
        for entry in KNOWN_BUSINESSES:
            if entry.name in normalized_name or normalized_name in entry.name:
                return _result(entry.category_id, entry.confidence, entry.name)

        best_entry, best_similarity = self._best_fuzzy_match(normalized_name)
        if best_entry is not None:
            confidence = _round_half_up(best_entry.confidence * best_similarity)
            return _result(best_entry.category_id, confidence, best_entry.name)

        for pattern in KEYWORD_PATTERNS:
            for keyword in pattern.keywords:
                if keyword in full_text:
                    return _result(pattern.category_id, pattern.confidence, keyword)

        for entry in KNOWN_BUSINESSES:
            for token in entry.name.split(" "):
                if len(token) > self.partial_token_min_length and token in normalized_name:
                    confidence = _round_half_up(entry.confidence * self.partial_match_discount)
                    return _result(entry.category_id, confidence, token)

        return ClassificationResult(category=other_category(), confidence=0, matched_term=UNKNOWN_TERM)

    def _best_fuzzy_match(self, normalized_name: str) -> tuple[DictionaryEntry | None, float]:
        best_entry: DictionaryEntry | None = None
        best_similarity = 0.0
        for entry in KNOWN_BUSINESSES:
            similarity = calculate_similarity(normalized_name, entry.name)
            # Strict comparison keeps the earliest entry on ties.
            if similarity > self.fuzzy_threshold and similarity > best_similarity:
                best_entry = entry
                best_similarity = similarity
        return best_entry, best_similarity


def detect_business_type(name: str | None, address: str | None = None) -> ClassificationResult:
    """Summary: Classify with the default thresholds.

    Importance: Convenience wrapper for callers that do not need configuration.
    Alternatives: Instantiate BusinessClassifier directly.
    """

    return _DEFAULT_CLASSIFIER.classify(name, address)


def validate_tables() -> None:
    """Summary: Check that every rule references a registered category.

    Importance: Catches table edits that would break classification at startup.
    Alternatives: Rely on tests alone to catch broken references.
    """

    if get_category_by_id(OTHER_CATEGORY_ID) is None:
        raise ValueError("Fallback category 'other' is not registered")
    if len(BUSINESS_LOOKUP) != len(KNOWN_BUSINESSES):
        raise ValueError("Business dictionary contains duplicate names")
    references = [(entry.name, entry.category_id, entry.confidence) for entry in KNOWN_BUSINESSES]
    references.extend(
        (obvious.pattern, obvious.category_id, obvious.confidence) for obvious in OBVIOUS_PATTERNS
    )
    references.extend(
        (pattern.category_id, pattern.category_id, pattern.confidence)
        for pattern in KEYWORD_PATTERNS
    )
    for term, category_id, confidence in references:
        if get_category_by_id(category_id) is None:
            raise ValueError(f"Unknown category {category_id!r} referenced by {term!r}")
        if not 0 <= confidence <= 100:
            raise ValueError(f"Confidence {confidence} out of range for {term!r}")


def _result(category_id: str, confidence: int, matched_term: str) -> ClassificationResult:
    category = get_category_by_id(category_id) or other_category()
    return ClassificationResult(category=category, confidence=confidence, matched_term=matched_term)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


_DEFAULT_CLASSIFIER = BusinessClassifier()
