"""Extraction stage - split, rewrite, validate and emit sentences per article."""

import os
import sys
from collections import Counter
from dataclasses import dataclass, field
from typing import IO, Callable, Iterable, Iterator, Optional

from ..config import DEFAULT_MAX_SENTENCES, REJECTIONS_LOG, SUMMARY_FILE
from ..errors import InputReadError
from ..rules import RuleSet, load_rules
from ..text_processing import Candidate, apply_replacements, split_candidates, validate
from ..utils.io_utils import Article, ArticleOrError, emit_sentences, iter_articles, iter_text_articles
from ..utils.logging import append_jsonl, ensure_logdir, log, reset_log, write_json

# Called with (candidate, reason) for every rejected candidate
RejectHook = Callable[[Candidate, str], None]

PROGRESS_EVERY = 10_000


@dataclass
class RunStats:
    """Counters for one extraction run."""

    articles: int = 0
    skipped: int = 0
    candidates: int = 0
    accepted: int = 0
    rejections: Counter = field(default_factory=Counter)

    def as_dict(self) -> dict:
        return {
            "articles": self.articles,
            "skipped": self.skipped,
            "candidates": self.candidates,
            "accepted": self.accepted,
            "rejected": sum(self.rejections.values()),
            "rejections": dict(self.rejections.most_common()),
        }


def select_sentences(
    candidates: Iterable[Candidate],
    rules: RuleSet,
    max_sentences: Optional[int] = DEFAULT_MAX_SENTENCES,
    no_check: bool = False,
    on_reject: Optional[RejectHook] = None,
) -> Iterator[str]:
    """Yield accepted sentences for one article, in the order they were found.

    Replacements are applied to each candidate, then it is validated unless
    ``no_check`` is set. Once ``max_sentences`` have been accepted the
    remaining candidates are not evaluated.

    Args:
        candidates: Candidates in splitter order
        rules: Language rule set
        max_sentences: Cap per article; None for no cap
        no_check: Skip validation and accept every candidate
        on_reject: Optional hook receiving each rejected candidate and its reason

    Yields:
        Final (trimmed) sentence text
    """
    if max_sentences is not None and max_sentences <= 0:
        return
    accepted = 0
    for candidate in candidates:
        rewritten = apply_replacements(candidate, rules.replacements)
        if not no_check:
            outcome = validate(rewritten.text, rules)
            if not outcome.accepted:
                if on_reject is not None:
                    on_reject(rewritten, outcome.reason)
                continue
        text = rewritten.text.strip()
        if not text:
            continue
        yield text
        accepted += 1
        if max_sentences is not None and accepted >= max_sentences:
            return


def extract_article(
    text: str,
    rules: RuleSet,
    max_sentences: Optional[int] = DEFAULT_MAX_SENTENCES,
    no_check: bool = False,
    on_reject: Optional[RejectHook] = None,
) -> Iterator[str]:
    """Run one article's raw text through splitter, replacements, validator and selector."""
    return select_sentences(split_candidates(text, rules), rules, max_sentences, no_check, on_reject)


class SentenceExtractor:
    """Streams accepted sentences from a sequence of articles to an output.

    Articles that failed to read are logged and skipped; everything else is
    processed one article at a time and written out immediately.
    """

    def __init__(
        self,
        rules: RuleSet,
        max_sentences: Optional[int] = DEFAULT_MAX_SENTENCES,
        no_check: bool = False,
        log_dir: Optional[str] = None,
    ):
        self.rules = rules
        self.max_sentences = max_sentences
        self.no_check = no_check
        self.log_dir = log_dir
        self.stats = RunStats()
        self._rejections_path = None
        if log_dir:
            ensure_logdir(log_dir)
            self._rejections_path = reset_log(log_dir, REJECTIONS_LOG)

    def process(self, article: Article, out: IO[str]) -> int:
        """Extract one article and write its sentences; returns the number written."""
        candidates = split_candidates(article.text, self.rules)
        self.stats.articles += 1
        self.stats.candidates += len(candidates)
        pending = []

        def on_reject(candidate: Candidate, reason: str):
            self.stats.rejections[reason] += 1
            if self._rejections_path:
                pending.append({
                    "stage": "extract",
                    "source": article.source,
                    "title": article.title,
                    "position": candidate.position,
                    "sentence": candidate.text,
                    "filter_reason": reason,
                })

        written = emit_sentences(
            select_sentences(candidates, self.rules, self.max_sentences, self.no_check, on_reject),
            out,
        )
        if pending:
            append_jsonl(self._rejections_path, pending)
        self.stats.accepted += written
        return written

    def run(self, articles: Iterable[ArticleOrError], out: IO[str]) -> RunStats:
        """Process every article, skipping the ones that could not be read."""
        for item in articles:
            if isinstance(item, InputReadError):
                self.stats.skipped += 1
                log("extract", f"[WARN] Skipping unreadable article: {item}")
                continue
            self.process(item, out)
            if self.stats.articles % PROGRESS_EVERY == 0:
                log("extract", f"{self.stats.articles:,} articles, {self.stats.accepted:,} sentences")
        return self.stats

    def write_summary(self) -> Optional[str]:
        if not self.log_dir:
            return None
        path = os.path.join(self.log_dir, SUMMARY_FILE)
        summary = self.stats.as_dict()
        summary.update({
            "language": self.rules.language,
            "no_check": self.no_check,
            "max_sentences": self.max_sentences,
        })
        write_json(path, summary)
        return path


def run_stage_extract(args, out: Optional[IO[str]] = None) -> RunStats:
    """Run the extraction stage.

    Args:
        args: Argument namespace with ``language``, ``input``, ``plain_text``,
            ``no_check``, ``max_sentences``, ``rules_dir``, ``words_file``,
            ``log_dir`` and ``output``
        out: Output stream; defaults to ``args.output`` or stdout

    Returns:
        Statistics of the run

    Raises:
        ConfigError: If the rule set cannot be loaded (before anything is read)
    """
    rules = load_rules(args.language, getattr(args, "rules_dir", None), getattr(args, "words_file", None))

    max_sentences = args.max_sentences
    if max_sentences is not None and max_sentences <= 0:
        max_sentences = None
    no_check = getattr(args, "no_check", False)
    extractor = SentenceExtractor(rules, max_sentences, no_check, getattr(args, "log_dir", None))

    reader = iter_text_articles if getattr(args, "plain_text", False) else iter_articles
    mode = "no_check" if no_check else "checked"
    cap = max_sentences if max_sentences is not None else "unlimited"
    log("extract", f"Extracting '{rules.language}' sentences from {args.input} ({mode}, max {cap} per article)")

    output_path = getattr(args, "output", None)
    if out is None and output_path:
        with open(output_path, "a", encoding="utf-8") as f:
            stats = extractor.run(reader(args.input), f)
    else:
        stats = extractor.run(reader(args.input), out or sys.stdout)

    summary_path = extractor.write_summary()
    log("extract", f"Done: {stats.articles:,} articles ({stats.skipped:,} skipped), "
                   f"{stats.candidates:,} candidates, {stats.accepted:,} sentences")
    if stats.rejections:
        top = ", ".join(f"{r}={c:,}" for r, c in stats.rejections.most_common(5))
        log("extract", f"Top rejection reasons: {top}")
    if summary_path:
        log("extract", f"Summary saved to {summary_path}")
    return stats
