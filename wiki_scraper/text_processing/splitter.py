"""Abbreviation-aware sentence boundary splitting."""

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from nltk.tokenize.punkt import PunktSentenceTokenizer

from ..config import CLOSING_CHARS, SENTENCE_END_CHARS
from ..rules import RuleSet


@dataclass(frozen=True)
class Candidate:
    """A trimmed text span proposed as a sentence.

    ``position`` is the character offset of the span within the article text.
    """

    text: str
    position: int


# Untrained Punkt: generic boundary heuristic, no model download required
_tokenizer = PunktSentenceTokenizer()

_paragraph_re = re.compile(r"[^\r\n]+")
_context_before_re = re.compile(r"(?:\S+\s+)?\S*$")
_context_after_re = re.compile(r"\S*(?:\s+\S+)?")
_CONTEXT_LOOKBEHIND = 100


def _boundary_index(paragraph: str, end: int) -> Optional[int]:
    """Index of the punctuation character that ends the span ``[..end)``."""
    i = end - 1
    while i >= 0 and paragraph[i] in CLOSING_CHARS:
        i -= 1
    if i >= 0 and paragraph[i] in SENTENCE_END_CHARS:
        return i
    return None


def boundary_context(paragraph: str, index: int) -> Tuple[str, int]:
    """Context window around the boundary punctuation at ``index``.

    The window holds the token ending in the punctuation, the token before it
    and the token after it.

    Returns:
        Tuple of (context, offset of the punctuation inside the context)
    """
    lower = max(0, index + 1 - _CONTEXT_LOOKBEHIND)
    start = lower + _context_before_re.search(paragraph[lower : index + 1]).start()
    tail = _context_after_re.match(paragraph, index + 1)
    return paragraph[start : tail.end()], index - start


def is_suppressed(paragraph: str, index: int, patterns: Sequence[re.Pattern]) -> bool:
    """Check whether an abbreviation pattern covers the boundary at ``index``.

    Patterns are tried in configured order and the first one with a match
    spanning the punctuation character wins.
    """
    if not patterns:
        return False
    context, offset = boundary_context(paragraph, index)
    for pattern in patterns:
        for m in pattern.finditer(context):
            if m.start() <= offset < m.end():
                return True
            if m.start() > offset:
                break
    return False


def _paragraph_spans(paragraph: str, patterns: Sequence[re.Pattern]) -> Iterator[Tuple[int, int]]:
    spans = list(_tokenizer.span_tokenize(paragraph))
    start = None
    for i, (span_start, span_end) in enumerate(spans):
        if start is None:
            start = span_start
        if i + 1 < len(spans):
            index = _boundary_index(paragraph, span_end)
            if index is not None and is_suppressed(paragraph, index, patterns):
                continue
        yield start, span_end
        start = None


def split_candidates(text: str, rules: RuleSet) -> List[Candidate]:
    """Split article text into candidate sentences.

    Paragraphs (lines) are split independently; within a paragraph Punkt
    proposes boundaries at ``.``, ``?`` and ``!`` and the rule set's
    abbreviation patterns veto the ones that are not sentence ends.

    Args:
        text: Raw article text
        rules: Rule set supplying ``abbreviation_patterns``

    Returns:
        Candidates in text order, trimmed, without empty spans
    """
    candidates: List[Candidate] = []
    for para in _paragraph_re.finditer(text):
        paragraph = para.group()
        if not paragraph.strip():
            continue
        for start, end in _paragraph_spans(paragraph, rules.abbreviation_patterns):
            span = paragraph[start:end]
            stripped = span.strip()
            if not stripped:
                continue
            offset = para.start() + start + (len(span) - len(span.lstrip()))
            candidates.append(Candidate(stripped, offset))
    return candidates
