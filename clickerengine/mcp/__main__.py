"""CLI entry point: python -m clickerengine.mcp <world_module>"""

from __future__ import annotations

import sys


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python -m clickerengine.mcp <world_module>", file=sys.stderr)
        print("Example: python -m clickerengine.mcp examples.gold_mine", file=sys.stderr)
        sys.exit(1)

    module_path = sys.argv[1]

    # Redirect stdout to stderr during module loading in case define_world() prints
    real_stdout = sys.stdout
    sys.stdout = sys.stderr
    try:
        from clickerengine.cli import load_world

        load_world(module_path)
    finally:
        sys.stdout = real_stdout

    from clickerengine.mcp.server import create_server

    server = create_server(lambda: load_world(module_path))
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
