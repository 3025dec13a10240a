"""Console entry point: shows the banner, asks for a script and runs it."""

from __future__ import annotations

import sys

from workbench.interpreter import read_script_file

_TITLE = "Universal Workbench"
BANNER = "\n".join(["", "=" * len(_TITLE), _TITLE, "=" * len(_TITLE), ""])


def main(argv: list[str] | None = None) -> int:
    """Run a script named on the command line or typed at the prompt."""
    args = sys.argv[1:] if argv is None else argv
    print(BANNER)
    print("File to run")
    if args:
        filename = args[0]
    else:
        try:
            filename = input()
        except EOFError:
            filename = ""
    try:
        read_script_file(filename)
    except OSError:
        print("Error opening the file!", end="", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())