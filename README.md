# workbench

A small console workbench that runs plain-text scripts. Each line of a script holds
at most one command, written as `action(context)`. Anything after a `#` on a line
is a comment.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running a script

```
workbench
```

The command prints a banner and `File to run`, then reads the path of the script
from standard input. The path may also be given on the command line:

```
workbench scripts\main.txt
```

The command exits with status 0 when the script ran, and 1 when the script could
not be opened (`Error opening the file!` goes to standard error) or a path in it
stepped above the script's directory.

## Script commands

| Command             | What it does                                                                    |
|---------------------|---------------------------------------------------------------------------------|
| `log("name.txt")`   | Stamps and closes any log that is open, then creates (or empties) the file and writes `Created new log at <time>` |
| `print("text")`     | Writes `<script name>: text` to the current log; nothing is written if no log is open |
| `open("other.txt")` | Runs another script. Its prints go to the calling script's log while that log is open |
| `closelog()`        | Writes `Closing log at <time>` to the current log and closes it                 |

Any other action prints `invalid command!`. After each `print` and `open` the
workbench also prints `printing!` or `opening!`, and every resolved argument path
is echoed to standard output.

An argument needs at least three characters. If it contains a `"`, its first and
last characters are dropped, so `print("hi")` writes `hi`.

A `log` in a script started with `open` also closes the calling script's log. Once
the started script returns, the calling script reopens its own log in append mode
if it had been closed, and writes `Reopened log at <time>`.

### Paths

Arguments are resolved against the directory that holds the script. Only the
backslash is treated as a path separator, so on systems that use `/` a script path
without backslashes resolves its arguments against the current directory. When an
argument contains a backslash, each `..` in it steps up one directory from the
script's directory.

Example script:

```
log("run.log")          # start a fresh log beside this script
print("hello")          # the log now holds: script.txt: hello
open("..\other.txt")    # run a script from the parent directory
closelog()
```

## Using it from Python

```python
from workbench.interpreter import parse_line, resolve_path, read_script_file
from workbench.chemistry import format_scientific

parsed = parse_line('print("hello") # greeting')
print(parsed.action, parsed.text)            # print hello

print(resolve_path("scripts\\", "run.log"))  # scripts\run.log

read_script_file("scripts\\main.txt", None)

print(format_scientific(6.02214076e23, 4))   # 6.022e+23
```

- `workbench.interpreter` holds `parse_line`, `split_script_path`, `resolve_path`,
  `read_script_file`, the `ParsedLine` result and the `LogFile` wrapper.
- `workbench.chemistry` holds `format_scientific` and `print_scientific`; a digit
  count below one falls back to six digits after the decimal point.
- `workbench.environment` defines `VarType`, `InterpVar` and `Environment`.

## What it does not do

Scripts have no variables, arithmetic, conditions or loops: the four commands above
are all there is. The types in `workbench.environment` are not used by the
interpreter yet, and `Environment` holds no state. The chemistry module offers
number formatting only, no chemistry calculations.