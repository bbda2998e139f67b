"""Per-language rule sets and their bundled TOML documents."""

from .loader import RuleSet, build_rules, load_rules, read_word_list

__all__ = [
    "RuleSet",
    "build_rules",
    "load_rules",
    "read_word_list",
]
