"""
Lexical helpers for the Turtle subset: tokens, comments, statement blocks
and prefix declarations.

None of these functions raise on malformed input. An unterminated string or
URI simply runs to the end of the text and is returned as a token.
"""
import re
from typing import Iterator, List

from .model import Prefix

SEPARATORS = ";,[]"

PREFIX_PATTERN = re.compile(r"@prefix\s+(\w*):?\s+<([^>]+)>\s*\.")
BLOCK_END_PATTERN = re.compile(r"\.\s*(?=\n|$)")

_LANG_CHAR = re.compile(r"[a-zA-Z-]")
_DATATYPE_STOP = re.compile(r"[\s;,.\[\]]")
_BARE_STOP = re.compile(r"[\s;,\[\]]")


def _scan_string(text: str, start: int) -> int:
    # start points at the opening quote; returns the index past the literal and its suffix
    j = start + 1
    while j < len(text) and text[j] != '"':
        if text[j] == "\\":
            j += 1
        j += 1
    j += 1

    while j < len(text) and text[j] in "@^":
        if text[j] == "@":
            j += 1
            while j < len(text) and _LANG_CHAR.match(text[j]):
                j += 1
        elif text.startswith("^^", j):
            j += 2
            if j < len(text) and text[j] == "<":
                while j < len(text) and text[j] != ">":
                    j += 1
                j += 1
            else:
                while j < len(text) and not _DATATYPE_STOP.match(text[j]):
                    j += 1
        else:
            break
    return min(j, len(text))


def iter_tokens(text: str) -> Iterator[str]:
    """Yield the tokens of ``text`` one at a time, in source order."""
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch.isspace():
            i += 1
            continue

        if ch == '"':
            j = _scan_string(text, i)
            yield text[i:j]
            i = j
            continue

        if ch == "<":
            j = text.find(">", i + 1)
            j = n if j < 0 else j + 1
            yield text[i:j]
            i = j
            continue

        if ch in SEPARATORS:
            yield ch
            i += 1
            continue

        # prefixed names, the keyword `a`, numbers, booleans
        j = i
        while j < n and not _BARE_STOP.match(text[j]):
            j += 1
        yield text[i:j]
        i = j


def tokenize(text: str) -> List[str]:
    return list(iter_tokens(text))


def _comment_start(line: str) -> int:
    # first '#' outside <...>; -1 if there is none
    in_iri = False
    in_string = False
    for i, ch in enumerate(line):
        if ch == '"':
            in_string = not in_string
        elif in_string:
            continue
        elif ch == "<":
            in_iri = True
        elif ch == ">":
            in_iri = False
        elif ch == "#" and not in_iri:
            return i
    return -1


def strip_comments(content: str) -> str:
    """Drop ``#`` comments that do not sit inside a quoted string or a URI.

    Works line by line: a ``#`` with an odd number of quotes before it on its
    line is assumed to be inside a literal, and a ``#`` between ``<`` and
    ``>`` belongs to a URI. Either way the scan moves on, so a later ``#``
    on the same line can still start a comment (``"a#b" . # note``).
    Strings spanning several lines are not tracked.
    """
    cleaned = []
    for line in content.split("\n"):
        hash_idx = _comment_start(line)
        if hash_idx >= 0:
            line = line[:hash_idx]
        cleaned.append(line)
    return "\n".join(cleaned)


def split_blocks(cleaned: str) -> List[str]:
    """Split comment-free text into trimmed statement blocks.

    A block ends at a ``.`` followed by a newline or the end of the text, so
    dots inside URIs and decimals on the same line do not end a statement.
    Empty blocks and ``@prefix`` declarations are left out.
    """
    blocks = []
    for block in BLOCK_END_PATTERN.split(cleaned):
        trimmed = block.strip()
        if not trimmed or trimmed.startswith("@prefix"):
            continue
        blocks.append(trimmed)
    return blocks


def find_prefixes(content: str) -> List[Prefix]:
    """Collect ``@prefix`` declarations from the whole document.

    A prefix declared twice keeps its first position and takes the last
    namespace.
    """
    table = {}
    for match in PREFIX_PATTERN.finditer(content):
        table[match.group(1)] = match.group(2)
    return [Prefix(prefix=name, uri=uri) for name, uri in table.items()]
