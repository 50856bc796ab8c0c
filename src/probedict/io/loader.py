"""Bulk loading of tab-separated dictionary files."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from ..table.engine import HashEngine
from ..table.errors import LengthExceededError
from ..table.slots import InsertStatus, Origin
from ..utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ENCODING = "utf-8"


@dataclass
class LoadReport:
    """Counts of what happened to each line of a dictionary file.

    Attributes:
        lines: Lines read
        inserted: Pairs stored as new entries
        merged: Pairs appended to an existing entry
        skipped: Lines without a tab
        rejected: Lines that did not decode, or whose word or translation
            exceeded its bound
        table_full: Pairs that found no free slot
    """

    lines: int = 0
    inserted: int = 0
    merged: int = 0
    skipped: int = 0
    rejected: int = 0
    table_full: int = 0


def split_line(line: str) -> Optional[Tuple[str, str]]:
    """Split ``word<TAB>translation`` at the first tab.

    The word is lowercased and the trailing newline removed from the
    translation. Lines without a tab return None.
    """
    word, tab, translation = line.partition("\t")
    if not tab:
        return None
    return word.lower(), translation.rstrip("\n")


def _decode_lines(
    path: Union[str, Path], encoding: str
) -> Iterator[Tuple[int, Optional[str]]]:
    """Yield (line_no, text); text is None for a line that does not decode."""
    with open(path, "rb") as f:
        for line_no, raw in enumerate(f, start=1):
            try:
                text = raw.decode(encoding)
            except UnicodeDecodeError as e:
                logger.warning(
                    "%s:%d: not valid %s (%s); line rejected", path, line_no, encoding, e.reason
                )
                yield line_no, None
                continue
            if text.endswith("\r\n"):
                text = text[:-2] + "\n"
            yield line_no, text


def read_pairs(
    path: Union[str, Path], encoding: str = DEFAULT_ENCODING
) -> Iterator[Tuple[int, str, str]]:
    """
    Stream (line_no, word, translation) from a dictionary file.

    Each line is decoded strictly. Lines that do not decode are logged and
    dropped, never patched with replacement characters. Length bounds are
    not checked here; the engine enforces them on insert.

    Args:
        path: Text file, one ``word<TAB>translation`` per line
        encoding: Text encoding of the file

    Yields:
        (line_no, word, translation), line numbers starting at 1.
        Lines without a tab are not yielded.

    Raises:
        OSError: If the file cannot be opened
        LookupError: If the encoding is unknown
    """
    for line_no, text in _decode_lines(path, encoding):
        pair = split_line(text) if text is not None else None
        if pair is not None:
            yield line_no, pair[0], pair[1]


def load_dictionary(
    engine: HashEngine, path: Union[str, Path], encoding: str = DEFAULT_ENCODING
) -> LoadReport:
    """
    Insert every pair of a dictionary file as a load-phase operation.

    Lines that do not decode and over-long words or translations are
    rejected and skipped, never altered or truncated.

    Args:
        engine: Target table
        path: Dictionary file
        encoding: Text encoding of the file

    Returns:
        LoadReport

    Raises:
        OSError: If the file cannot be opened
        LookupError: If the encoding is unknown
    """
    report = LoadReport()
    for line_no, text in _decode_lines(path, encoding):
        report.lines += 1
        if text is None:
            report.rejected += 1
            continue
        pair = split_line(text)
        if pair is None:
            report.skipped += 1
            continue
        word, translation = pair
        try:
            result = engine.insert(word, translation, Origin.LOAD)
        except LengthExceededError as e:
            logger.warning("%s:%d: %s; line skipped", path, line_no, e)
            report.rejected += 1
            continue

        if result.status is InsertStatus.PLACED:
            report.inserted += 1
        elif result.status is InsertStatus.MERGED:
            report.merged += 1
        else:
            report.table_full += 1

    logger.info(
        "Loaded %s: %d lines, %d inserted, %d merged, %d skipped, %d rejected, %d not hashed",
        path, report.lines, report.inserted, report.merged,
        report.skipped, report.rejected, report.table_full,
    )
    return report
