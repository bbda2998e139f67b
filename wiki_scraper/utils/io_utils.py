"""I/O utility functions: corpus reading and sentence emission."""

import os
from dataclasses import dataclass
from typing import IO, Iterable, Iterator, List, Union

import orjson

from ..config import INPUT_ENCODING, TEXT_FIELD, TITLE_FIELD
from ..errors import InputReadError


@dataclass(frozen=True)
class Article:
    """Raw article text plus where it came from."""

    source: str
    text: str
    title: str = ""


# Either an article or the error raised while reading it
ArticleOrError = Union[Article, InputReadError]


def ensure_output_dir(path: str):
    """Ensure an output directory exists.

    Args:
        path: Directory path to create
    """
    os.makedirs(path, exist_ok=True)


def list_input_files(path: str) -> List[str]:
    """List input files under a path, recursively and in sorted order.

    Hidden files and directories are skipped.

    Args:
        path: A file or a directory

    Returns:
        List of file paths

    Raises:
        FileNotFoundError: If the path does not exist
    """
    if os.path.isfile(path):
        return [path]
    if not os.path.isdir(path):
        raise FileNotFoundError(f"Input path not found: {path}")
    files = []
    for root, dirs, names in os.walk(path):
        dirs[:] = sorted(d for d in dirs if not d.startswith("."))
        for name in sorted(names):
            if not name.startswith("."):
                files.append(os.path.join(root, name))
    return files


def _read_lines(path: str) -> Iterator[bytes]:
    with open(path, "rb") as f:
        yield from f


def parse_article_line(line: Union[str, bytes], source: str) -> Article:
    """Decode one WikiExtractor ``--json`` line into an Article.

    Raises:
        InputReadError: If the line is not a UTF-8 JSON object with a string ``text``
    """
    try:
        record = orjson.loads(line)
    except orjson.JSONDecodeError as e:
        raise InputReadError(f"invalid JSON: {e}", source) from e
    if not isinstance(record, dict) or not isinstance(record.get(TEXT_FIELD), str):
        raise InputReadError(f"record has no '{TEXT_FIELD}' string", source)
    title = record.get(TITLE_FIELD)
    return Article(source, record[TEXT_FIELD], title if isinstance(title, str) else "")


def _parse_text_line(line: bytes, source: str) -> Article:
    try:
        text = line.decode(INPUT_ENCODING)
    except UnicodeDecodeError as e:
        raise InputReadError(f"invalid {INPUT_ENCODING}: {e}", source) from e
    return Article(source, text.rstrip("\r\n"))


def _iter_file(path: str, as_json: bool) -> Iterator[ArticleOrError]:
    # Lines are decoded one at a time so a bad byte only costs its own article
    parse = parse_article_line if as_json else _parse_text_line
    try:
        for lineno, line in enumerate(_read_lines(path), start=1):
            if not line.strip():
                continue
            try:
                yield parse(line, f"{path}:{lineno}")
            except InputReadError as e:
                yield e
    except OSError as e:
        yield InputReadError(str(e), path)


def iter_articles(path: str) -> Iterator[ArticleOrError]:
    """Iterate articles from WikiExtractor JSON output, one article per line.

    Read failures are yielded (not raised) as InputReadError so the caller can
    skip the article and continue; a file that fails mid-way yields the
    articles read so far followed by the error.

    Args:
        path: A WikiExtractor output file or directory

    Yields:
        Article or InputReadError, lazily, in file order
    """
    for file_path in list_input_files(path):
        yield from _iter_file(file_path, as_json=True)


def iter_text_articles(path: str) -> Iterator[ArticleOrError]:
    """Iterate plain-text articles: every non-empty line is one article.

    Args:
        path: A text file or directory of text files

    Yields:
        Article or InputReadError, lazily, in file order
    """
    for file_path in list_input_files(path):
        yield from _iter_file(file_path, as_json=False)


def emit_sentences(sentences: Iterable[str], stream: IO[str]) -> int:
    """Write sentences one per line and flush so the output can be tailed.

    Args:
        sentences: Accepted sentences in discovery order
        stream: Text stream (stdout or an open file)

    Returns:
        Number of sentences written
    """
    count = 0
    for sentence in sentences:
        stream.write(sentence)
        stream.write("\n")
        count += 1
    if count:
        stream.flush()
    return count
