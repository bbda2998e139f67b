"""
Wiki Scraper - speakable sentence extraction from Wikipedia articles.

This package turns WikiExtractor output into short, clean sentences for a
crowdsourced speech corpus:
  split → replace → validate → select → emit

Rules are declared per language in TOML documents (see ``rules/``).
"""

__version__ = "1.0.0"
