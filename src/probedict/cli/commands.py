"""Line-oriented interactive commands.

    s <word>                  search
    d <word>                  delete
    i <word> <translation>    insert
    q                         quit

Anything else is ignored.
"""

from typing import IO, Iterable

from ..table.engine import HashEngine
from ..table.errors import LengthExceededError
from ..table.slots import InsertStatus, Origin
from ..utils.logging import get_logger

logger = get_logger(__name__)

INDENT = "        "


class CommandProcessor:
    """Runs interactive commands against a table and writes their results."""

    def __init__(self, engine: HashEngine, out: IO[str]):
        """
        Args:
            engine: Table to operate on
            out: Stream receiving command output
        """
        self.engine = engine
        self.out = out

    def _say(self, text: str) -> None:
        self.out.write(f"{INDENT}{text}\n")

    def execute(self, line: str) -> bool:
        """
        Run one command line.

        Returns:
            False when the line asks to quit, True otherwise
        """
        tokens = line.split()
        if not tokens:
            return True
        op = tokens[0]
        if op == "q":
            return False

        if op in ("s", "d") and len(tokens) >= 2:
            word = tokens[1].lower()
            self.out.write(f"READ op:{op} query:{word}\n")
            try:
                if op == "s":
                    self.search(word)
                else:
                    self.delete(word)
            except LengthExceededError as e:
                self._say(f"{e} => command skipped.")
        elif op == "i" and len(tokens) == 3:
            word = tokens[1].lower()
            self.out.write(f"READ op:{op} query:{word}\n")
            try:
                self.insert(word, tokens[2])
            except LengthExceededError as e:
                self._say(f"{e} => item NOT inserted.")
        else:
            logger.debug("Ignoring command line %r", line)
        return True

    def search(self, word: str) -> None:
        result = self.engine.search(word)
        self._say(f"{result.probes} probes")
        if result.found:
            self._say(f"Translation: {result.entry.value}")
        else:
            self._say("NOT found")

    def delete(self, word: str) -> None:
        result = self.engine.delete(word)
        self._say(f"{result.probes} probes")
        if result.deleted:
            self._say("Item was deleted.")
        else:
            self._say("Item not found => no deletion.")

    def insert(self, word: str, translation: str) -> None:
        self._say(f"Will insert pair [{word},{translation}]")
        result = self.engine.insert(word, translation, Origin.INTERACTIVE)
        self._say(f"{result.probes} probes")
        if result.status is InsertStatus.TABLE_FULL:
            self._say("Table full => item NOT inserted.")

    def run(self, lines: Iterable[str]) -> int:
        """
        Execute lines until ``q`` or end of input.

        Returns:
            Number of lines consumed
        """
        consumed = 0
        for line in lines:
            consumed += 1
            if not self.execute(line):
                break
        return consumed
