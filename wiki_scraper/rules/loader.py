"""Per-language rule sets: defaults, TOML loading and word-list merging."""

import os
import re
import sys
import tomllib
from dataclasses import dataclass, replace
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

from ..config import BUNDLED_RULES_DIR, INPUT_ENCODING, RULES_SUFFIX, WORDS_SUFFIX
from ..errors import ConfigError


@dataclass(frozen=True)
class RuleSet:
    """Immutable splitting and validation rules for one language.

    Every field has a default, so a partial (or missing) rule document still
    yields a fully defined rule set.
    """

    language: str = "default"
    abbreviation_patterns: Tuple[re.Pattern, ...] = ()
    disallowed_patterns: Tuple[re.Pattern, ...] = ()
    allowed_symbols_regex: Optional[re.Pattern] = None
    disallowed_symbols: FrozenSet[str] = frozenset()
    broken_whitespace: Tuple[str, ...] = ()
    disallowed_words: FrozenSet[str] = frozenset()
    disallowed_words_case_sensitive: bool = False
    even_symbols: Tuple[str, ...] = ()
    min_word_count: int = 1
    max_word_count: int = 14
    may_end_with_colon: bool = False
    needs_letter_start: bool = True
    needs_punctuation_end: bool = False
    needs_uppercase_start: bool = False
    quote_start_with_letter: bool = True
    min_characters: int = 0
    min_trimmed_length: int = 3
    may_contain_numbers: bool = True
    replacements: Tuple[Tuple[str, str], ...] = ()

    def normalize_word(self, word: str) -> str:
        """Strip non-letters from both ends and apply the list's case convention."""
        start, end = 0, len(word)
        while start < end and not word[start].isalpha():
            start += 1
        while end > start and not word[end - 1].isalpha():
            end -= 1
        word = word[start:end]
        return word if self.disallowed_words_case_sensitive else word.lower()

    def with_words(self, words: Iterable[str]) -> "RuleSet":
        """Return a copy with ``words`` unioned into ``disallowed_words``."""
        merged = set(self.disallowed_words)
        for w in words:
            w = w.strip()
            if w:
                merged.add(w if self.disallowed_words_case_sensitive else w.lower())
        return replace(self, disallowed_words=frozenset(merged))


def _log(msg: str):
    print(f"[rules] {msg}", file=sys.stderr)


def _expect(value: Any, kind, language: str, name: str):
    # bool is an int subclass; keep the two apart
    if kind is int and isinstance(value, bool):
        raise ConfigError(f"expected integer, got {value!r}", language, name)
    if not isinstance(value, kind):
        raise ConfigError(f"expected {kind.__name__}, got {type(value).__name__}", language, name)
    return value


def _string_list(value: Any, language: str, name: str) -> Tuple[str, ...]:
    _expect(value, list, language, name)
    for item in value:
        _expect(item, str, language, name)
    return tuple(value)


def _compile(pattern: str, language: str, name: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigError(f"pattern {pattern!r} does not compile: {e}", language, name) from e


def _parse_replacements(value: Any, language: str) -> Tuple[Tuple[str, str], ...]:
    _expect(value, list, language, "replacements")
    pairs = []
    for item in value:
        if not (isinstance(item, list) and len(item) == 2 and all(isinstance(s, str) for s in item)):
            raise ConfigError(f"expected [search, replacement] string pair, got {item!r}", language, "replacements")
        if not item[0]:
            raise ConfigError("search string must not be empty", language, "replacements")
        pairs.append((item[0], item[1]))
    return tuple(pairs)


_INT_FIELDS = ("min_word_count", "max_word_count", "min_characters", "min_trimmed_length")
_BOOL_FIELDS = (
    "may_end_with_colon",
    "needs_letter_start",
    "needs_punctuation_end",
    "needs_uppercase_start",
    "quote_start_with_letter",
    "disallowed_words_case_sensitive",
    "may_contain_numbers",
)
_KNOWN_FIELDS = set(_INT_FIELDS) | set(_BOOL_FIELDS) | {
    "abbreviation_patterns",
    "disallowed_patterns",
    "allowed_symbols_regex",
    "disallowed_symbols",
    "broken_whitespace",
    "disallowed_words",
    "even_symbols",
    "replacements",
}


def build_rules(data: Dict[str, Any], language: str = "default") -> RuleSet:
    """Build a RuleSet from an already parsed rule document.

    Args:
        data: Mapping of field name to raw value, as parsed from TOML
        language: Language identifier used in error messages

    Returns:
        RuleSet with absent fields at their defaults

    Raises:
        ConfigError: If a field has the wrong shape or a pattern does not compile
    """
    for key in sorted(set(data) - _KNOWN_FIELDS):
        _log(f"Ignoring unknown field '{key}' in rules for '{language}'")

    kwargs: Dict[str, Any] = {"language": language}
    for name in _INT_FIELDS:
        if name in data:
            value = _expect(data[name], int, language, name)
            if value < 0:
                raise ConfigError(f"must not be negative, got {value}", language, name)
            kwargs[name] = value
    for name in _BOOL_FIELDS:
        if name in data:
            kwargs[name] = _expect(data[name], bool, language, name)

    for name in ("abbreviation_patterns", "disallowed_patterns"):
        if name in data:
            patterns = _string_list(data[name], language, name)
            kwargs[name] = tuple(_compile(p, language, name) for p in patterns)

    allowed = data.get("allowed_symbols_regex", "")
    _expect(allowed, str, language, "allowed_symbols_regex")
    if allowed:
        kwargs["allowed_symbols_regex"] = _compile(allowed, language, "allowed_symbols_regex")

    if "disallowed_symbols" in data:
        symbols = _string_list(data["disallowed_symbols"], language, "disallowed_symbols")
        for s in symbols:
            if len(s) != 1:
                raise ConfigError(f"expected single characters, got {s!r}", language, "disallowed_symbols")
        kwargs["disallowed_symbols"] = frozenset(symbols)

    if "broken_whitespace" in data:
        kwargs["broken_whitespace"] = tuple(
            s for s in _string_list(data["broken_whitespace"], language, "broken_whitespace") if s
        )

    if "even_symbols" in data:
        kwargs["even_symbols"] = tuple(
            s for s in _string_list(data["even_symbols"], language, "even_symbols") if s
        )

    if "replacements" in data:
        kwargs["replacements"] = _parse_replacements(data["replacements"], language)

    rules = RuleSet(**kwargs)
    if rules.min_word_count > rules.max_word_count:
        raise ConfigError("min_word_count is greater than max_word_count", language, "min_word_count")
    if "disallowed_words" in data:
        rules = rules.with_words(_string_list(data["disallowed_words"], language, "disallowed_words"))
    return rules


def read_word_list(path: str, language: str = "default") -> Tuple[str, ...]:
    """Read a flat word list, one word per line.

    Raises:
        ConfigError: If the file cannot be read or decoded
    """
    try:
        with open(path, encoding=INPUT_ENCODING) as f:
            return tuple(line.strip() for line in f if line.strip())
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"cannot read word list {path}: {e}", language, "disallowed_words") from e


def load_rules(language: str, rules_dir: Optional[str] = None, words_file: Optional[str] = None) -> RuleSet:
    """Load the rule set for a language.

    Looks for ``<rules_dir>/<language>.toml``; when absent, every rule takes its
    default. A ``<language>.txt`` word list next to the document and the
    explicit ``words_file`` are both merged into ``disallowed_words``.

    Args:
        language: Language identifier, e.g. "english"
        rules_dir: Directory holding rule documents (defaults to the bundled ones)
        words_file: Optional extra blacklist, one word per line

    Returns:
        Fully populated RuleSet

    Raises:
        ConfigError: If the document is unparsable or structurally invalid
    """
    rules_dir = rules_dir or BUNDLED_RULES_DIR
    path = os.path.join(rules_dir, f"{language}{RULES_SUFFIX}")

    if os.path.exists(path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"cannot parse {path}: {e}", language) from e
        rules = build_rules(data, language)
        _log(f"Loaded rules for '{language}' from {path}")
    else:
        _log(f"No rules found at {path}, using defaults for '{language}'")
        rules = RuleSet(language=language)

    side_words = os.path.join(rules_dir, f"{language}{WORDS_SUFFIX}")
    for words_path in (side_words, words_file):
        if words_path and (words_path == words_file or os.path.exists(words_path)):
            words = read_word_list(words_path, language)
            rules = rules.with_words(words)
            _log(f"Merged {len(words):,} disallowed words from {words_path}")
    return rules
