"""Line-oriented script interpreter with log file handling."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import IO

_PATH_SEPARATOR = "\\"
_COMMENT_MARKER = "#"
_START_CONTEXT = "("
_END_CONTEXT = ")"


@dataclass(frozen=True)
class ParsedLine:
    """One script line split into action, raw context and string argument."""

    action: str
    context: str
    text: str


class LogFile:
    """A log file that may be open or closed; writes while closed are dropped."""

    def __init__(self) -> None:
        self.path: str | None = None
        self._handle: IO[str] | None = None

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    def open(self, path: str, truncate: bool = False) -> None:
        """Open path for appending, emptying it first when truncate is set."""
        self.close()
        self._handle = open(path, "w" if truncate else "a", encoding="utf-8")
        self.path = path

    def write(self, text: str) -> None:
        """Append text and flush; does nothing when the log is closed."""
        if self._handle is not None:
            self._handle.write(text)
            self._handle.flush()

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> LogFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def parse_line(line: str) -> ParsedLine:
    """Split a script line into its action, context and string argument."""
    command = line.split(_COMMENT_MARKER, 1)[0]
    start = line.find(_START_CONTEXT)
    action = line if start < 0 else line[:start]
    remainder = command[start + 1:]
    context = remainder.split(_END_CONTEXT, 1)[0]
    if len(context) >= 3:
        text = context[1:-1] if '"' in context else context
    else:
        text = ""
    return ParsedLine(action, context, text)


def split_script_path(filename: str) -> tuple[str, str]:
    """Return the directory part (with trailing separator) and the script name."""
    head, sep, tail = filename.rpartition(_PATH_SEPARATOR)
    return head + sep, tail


def _parent_cut(path: str) -> int:
    """Index where the last directory component of path begins, or -1."""
    starts = [0]
    position = path.find(_PATH_SEPARATOR)
    while position != -1:
        starts.append(position + 1)
        position = path.find(_PATH_SEPARATOR, position + 1)
    return starts[-2] if len(starts) > 1 else -1


def resolve_path(base_dir: str, text: str) -> str:
    """Resolve a script argument against the script's directory.

    Each leading '..' drops one directory from base_dir when the argument
    contains a path separator.
    """
    if not text:
        return ""
    path = base_dir
    if _PATH_SEPARATOR in text:
        while ".." in text:
            cut = _parent_cut(path)
            if cut < 0:
                raise ValueError(f"cannot navigate above {path!r} for {text!r}")
            path = path[:cut]
            text = text[2:]
    return path + text


def _stamp() -> str:
    return time.ctime() + "\n"


def _write_closing(log: LogFile) -> None:
    log.write(f"\nClosing log at {_stamp()}\n")
    log.close()


def read_script_file(filename: str, open_log: LogFile | None = None) -> None:
    """Run the script in filename.

    open_log is the log of the calling script when one script opens another;
    prints then go to it while it stays open.
    Raises OSError when the script itself cannot be opened.
    """
    base_dir, script_name = split_script_path(filename)
    nested = open_log is not None
    current = LogFile()
    log_path = ""

    with open(filename, encoding="utf-8") as script, current:
        for raw in script:
            parsed = parse_line(raw.removesuffix("\n"))
            target = ""
            if parsed.text:
                target = resolve_path(base_dir, parsed.text)
                print(target)

            if parsed.action == "log":
                if current.is_open:
                    _write_closing(current)
                if nested and open_log.is_open:
                    _write_closing(open_log)
                try:
                    current.open(target, truncate=True)
                except OSError as exc:
                    reason = exc.strerror or str(exc)
                    print(f"ERROR! CANNOT OPEN LOG FILE!\n{reason}\n\n{target}\n")
                else:
                    current.write(f"Created new log at {_stamp()}\n")
                    if not nested:
                        log_path = target
            elif parsed.action == "print":
                destination = open_log if nested and open_log.is_open else current
                destination.write(f"{script_name}: {parsed.text}\n")
                print("printing!")
            elif parsed.action == "open":
                try:
                    read_script_file(target, current)
                except OSError:
                    print("Error opening the file!", end="", file=sys.stderr)
                if not current.is_open:
                    try:
                        current.open(log_path)
                    except OSError:
                        pass
                    else:
                        current.write(f"Reopened log at {_stamp()}\n")
                print("opening!")
            elif parsed.action == "closelog":
                if nested and open_log.is_open:
                    _write_closing(open_log)
                else:
                    _write_closing(current)
            else:
                print("invalid command!")