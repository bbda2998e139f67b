"""Sentence validation: an ordered battery of rule predicates."""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..config import CLOSING_CHARS, QUOTE_CHARS, TERMINAL_PUNCTUATION
from ..rules import RuleSet


@dataclass(frozen=True)
class ValidationOutcome:
    """Accept, or reject with the name of the first failing check."""

    accepted: bool
    reason: Optional[str] = None


ACCEPTED = ValidationOutcome(True)

# Each check receives the trimmed sentence and returns True when it passes.
Check = Callable[[str, RuleSet], bool]


def _min_trimmed_length(s: str, rules: RuleSet) -> bool:
    return len(s) >= rules.min_trimmed_length


def _word_count(s: str, rules: RuleSet) -> bool:
    return rules.min_word_count <= len(s.split()) <= rules.max_word_count


def _letter_start(s: str, rules: RuleSet) -> bool:
    if not rules.needs_letter_start:
        return True
    return bool(s) and s[0].isalpha()


def _uppercase_start(s: str, rules: RuleSet) -> bool:
    if not rules.needs_uppercase_start:
        return True
    return bool(s) and not s[0].islower()


def _quote_start(s: str, rules: RuleSet) -> bool:
    if not rules.quote_start_with_letter or not s or s[0] not in QUOTE_CHARS:
        return True
    return len(s) > 1 and s[1].isalpha()


def _punctuation_end(s: str, rules: RuleSet) -> bool:
    if not rules.needs_punctuation_end:
        return True
    end = s.rstrip("".join(CLOSING_CHARS))
    return bool(end) and end[-1] in TERMINAL_PUNCTUATION


def _colon_end(s: str, rules: RuleSet) -> bool:
    return rules.may_end_with_colon or not s.endswith(":")


def _symbols(s: str, rules: RuleSet) -> bool:
    if rules.allowed_symbols_regex is not None:
        allowed = rules.allowed_symbols_regex
        return all(allowed.fullmatch(c) for c in s)
    return not any(c in rules.disallowed_symbols for c in s)


def _broken_whitespace(s: str, rules: RuleSet) -> bool:
    return not any(broken in s for broken in rules.broken_whitespace)


def _min_characters(s: str, rules: RuleSet) -> bool:
    if not rules.min_characters:
        return True
    return sum(1 for c in s if c.isalpha()) >= rules.min_characters


def _even_symbols(s: str, rules: RuleSet) -> bool:
    return all(s.count(symbol) % 2 == 0 for symbol in rules.even_symbols)


def _disallowed_words(s: str, rules: RuleSet) -> bool:
    if not rules.disallowed_words:
        return True
    return not any(rules.normalize_word(w) in rules.disallowed_words for w in s.split())


def _disallowed_patterns(s: str, rules: RuleSet) -> bool:
    return not any(p.search(s) for p in rules.disallowed_patterns)


def _numbers(s: str, rules: RuleSet) -> bool:
    return rules.may_contain_numbers or not any(c.isdigit() for c in s)


# Order matters: the first failing check names the rejection reason.
CHECKS: Tuple[Tuple[str, Check], ...] = (
    ("min_trimmed_length", _min_trimmed_length),
    ("word_count", _word_count),
    ("needs_letter_start", _letter_start),
    ("needs_uppercase_start", _uppercase_start),
    ("quote_start_with_letter", _quote_start),
    ("needs_punctuation_end", _punctuation_end),
    ("may_end_with_colon", _colon_end),
    ("symbols", _symbols),
    ("broken_whitespace", _broken_whitespace),
    ("min_characters", _min_characters),
    ("even_symbols", _even_symbols),
    ("disallowed_words", _disallowed_words),
    ("disallowed_patterns", _disallowed_patterns),
    ("numbers", _numbers),
)


def validate(text: str, rules: RuleSet) -> ValidationOutcome:
    """Check a candidate sentence against a rule set.

    Args:
        text: Candidate text (after replacements); trimmed before checking
        rules: Language rule set

    Returns:
        ValidationOutcome; ``reason`` is the name of the first failing check
    """
    s = text.strip()
    for name, check in CHECKS:
        if not check(s, rules):
            return ValidationOutcome(False, name)
    return ACCEPTED

