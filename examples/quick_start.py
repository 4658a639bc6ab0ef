#!/usr/bin/env python3
"""Quick start example for fcu2json.

This script demonstrates the library API: load an FCU layout file, build
the CBUS event view and print it as JSON, reporting load failures.

It uses the sample layout shipped with the tests.
"""

import sys
from pathlib import Path

# Add parent directory to path to allow importing fcu2json
sys.path.insert(0, str(Path(__file__).parent.parent))

from fcu2json.event_view import build, render
from fcu2json.exceptions import LoadError
from fcu2json.loader import load


def main() -> None:
    """Convert the sample layout and summarise it."""
    config_file = Path(__file__).parent.parent / "tests" / "data" / "mixed_events.xml"

    print(f"Loading FCU configuration {config_file.name}")

    try:
        dataset = load(str(config_file))
    except LoadError as e:
        print(f"Failed ({e.kind.value}): {e.message}")
        if e.suggestion:
            print(f"Suggestion: {e.suggestion}")
        sys.exit(1)

    print(f"Found {len(dataset.user_events)} user events")
    for node in dataset.user_nodes:
        print(f"  - node {node.node_num}: {node.node_name} ({node.module_name})")

    view = build(dataset)
    print(f"{len(view.cbusstates)} events are owned by their own node:\n")
    print(render(view))


if __name__ == "__main__":
    main()
