"""Quick start for probedict.

Loads the bundled Spanish-English sample into a small table, prints the load
report, then runs a few interactive operations.
"""

import io
from pathlib import Path

from probedict import (
    HashEngine,
    Origin,
    format_interactive_summary,
    format_load_report,
    load_dictionary,
)
from probedict.cli import CommandProcessor

SAMPLE = Path(__file__).with_name("spanish_sample.txt")


def main():
    """Run quick start."""
    print("probedict Quick Start")
    print("=" * 50)

    engine = HashEngine(capacity=37)
    report = load_dictionary(engine, SAMPLE)
    print(f"Loaded {report.inserted} words ({report.merged} merged) into {engine.capacity} slots")
    print(format_load_report(engine.stats.snapshot()))

    # Direct engine calls
    result = engine.search("casa")
    print(f"casa -> {result.entry.value} ({result.probes} probes)")

    result = engine.insert("gato", "feline", Origin.INTERACTIVE)
    print(f"insert gato -> {result.status.value} ({result.probes} probes)")

    result = engine.delete("perro")
    print(f"delete perro -> deleted={result.deleted} ({result.probes} probes)")

    # The same operations through the command surface
    out = io.StringIO()
    CommandProcessor(engine, out).run(["s árbol", "s perro", "i perro hound", "s perro", "q"])
    print(out.getvalue(), end="")

    print(format_interactive_summary(engine.stats.snapshot()))


if __name__ == "__main__":
    main()
