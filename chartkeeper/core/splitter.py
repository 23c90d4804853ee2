"""Split multi-document YAML text into independently parsed documents.

Sveltos manifests often share a file with unrelated Kubernetes resources,
and one of those neighbours may be broken. Letting PyYAML iterate the
whole stream would stop at the first error, so the text is cut on
``---`` markers first and every chunk is parsed on its own.

Typical usage::

    from chartkeeper.core.splitter import split_documents

    for document in split_documents(text):
        if document.ok:
            handle(document.data)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

import yaml

from chartkeeper.utils.logger import get_logger
from chartkeeper.exceptions import ManifestParseError
from chartkeeper.constants import DOCUMENT_MARKER

logger = get_logger("core.splitter")

_BaseLoader = getattr(yaml, "CSafeLoader", yaml.SafeLoader)

# Implicit tags still resolved for plain scalars; everything else
# (int, float, bool, timestamp) stays a string.
_KEPT_IMPLICIT_TAGS = frozenset(
    {
        "tag:yaml.org,2002:null",
        "tag:yaml.org,2002:merge",
    }
)


class ManifestLoader(_BaseLoader):
    """Safe loader that keeps plain scalars as text.

    ``chartVersion: 1.10`` loads as ``"1.10"`` rather than ``1.1``, and
    ``chartVersion: 2024-01-01`` stays a string instead of a date.
    """


ManifestLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in _KEPT_IMPLICIT_TAGS]
    for first, resolvers in _BaseLoader.yaml_implicit_resolvers.items()
}

# A bare marker line is consumed with its line break (LF or CRLF); any
# other text after the marker belongs to the next document.
_MARKER_PATTERN = re.compile(
    rf"^{re.escape(DOCUMENT_MARKER)}(?:[ \t]*\r?\n|[ \t]+|\r?$)",
    re.MULTILINE,
)

# SafeConstructor raises plain Python errors for explicit tags it cannot
# build, e.g. ``!!int abc`` or ``!!timestamp abc``.
_PARSE_ERRORS = (
    yaml.YAMLError,
    ValueError,
    TypeError,
    AttributeError,
    RecursionError,
)


@dataclass(frozen=True)
class ParsedDocument:
    """Outcome of parsing one YAML document.

    Attributes:
        index: Zero-based position of the document in the file.
        line_number: First line (1-indexed) of the document's text.
        data: Parsed tree; ``None`` for empty documents and failures.
        error: Parse failure, if any.
    """

    index: int
    line_number: int
    data: Any = None
    error: Optional[ManifestParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _iter_chunks(content: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, text)`` for each ``---`` separated chunk."""
    start = 0
    for match in _MARKER_PATTERN.finditer(content):
        yield content.count("\n", 0, start) + 1, content[start : match.start()]
        start = match.end()
    yield content.count("\n", 0, start) + 1, content[start:]


def parse_document(text: str) -> Any:
    """Parse a single YAML document with :class:`ManifestLoader`.

    Raises:
        yaml.YAMLError: The text is not valid YAML or holds several
            documents.
        ValueError: An explicitly tagged scalar cannot be constructed.
    """
    return yaml.load(text, Loader=ManifestLoader)


def split_documents(content: str) -> Iterator[ParsedDocument]:
    """Lazily parse every top-level document in ``content``.

    A chunk that fails to parse yields a :class:`ParsedDocument` carrying
    a :class:`ManifestParseError`; later chunks are still parsed.

    Args:
        content: Raw file text.

    Yields:
        One :class:`ParsedDocument` per chunk, in textual order.
    """
    for index, (line_number, text) in enumerate(_iter_chunks(content)):
        try:
            data = parse_document(text)
        except _PARSE_ERRORS as exc:
            logger.debug(
                "Skipping unparsable document %d (line %d): %s",
                index,
                line_number,
                exc,
            )
            yield ParsedDocument(
                index=index,
                line_number=line_number,
                error=ManifestParseError(
                    f"Invalid YAML: {exc}",
                    document_index=index,
                    line_number=line_number,
                ),
            )
            continue

        yield ParsedDocument(index=index, line_number=line_number, data=data)
