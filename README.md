# pipex

`pipex` connects a chain of commands with pipes. The first command reads from
an input file. Each command's output feeds the next one. The last command
writes to an output file. It works like this shell line:

```
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

## Installation

```
pip install .
```

This installs the `pipex` command. To install the test tools as well:

```
pip install .[test]
```

## Usage

### Pipeline

```
pipex infile "cmd1 args" "cmd2 args" [... "cmdN args"] outfile
```

You must give at least two commands. For example:

```
pipex input.txt "grep error" "wc -l" count.txt
```

If the output file is missing, it is created with mode `0644`. If it exists,
it is truncated.

### Here-document

```
pipex here_doc LIMITER "cmd1 args" "cmd2 args" outfile
```

Lines are read from standard input until a line equal to `LIMITER` appears.
That line is consumed but not passed on. The collected text goes to `cmd1`,
and the output of `cmd2` is **appended** to `outfile`. It works like:

```
cmd1 << LIMITER | cmd2 >> outfile
```

The here-document form takes exactly two commands.

### Command lookup

Each command is split on spaces into a program name and its arguments.
Empty pieces are dropped.

A name with no `/` in it is looked up in the directories listed in `PATH`. The
first directory where the name is executable wins. A name that contains `/` is
run as given.

The commands run with the environment of the `pipex` process.

### Exit status and errors

- The exit status is that of the last command in the pipeline.
- If a command cannot be found or started, `zsh: command not found: NAME` is
  printed on standard error. That command's status is `127`.
- If the input or output file cannot be opened, `zsh: <reason>` is printed.
  The command that needed the file gets status `1`.
- If the environment has no `PATH` entry, the status is `1`.
- If the wrong number of arguments is given, `wrong number of args` is printed
  and the status is `1`.
- A command killed by a signal counts as status `0`.

The other commands in the chain still run when one of them fails.

## Using it from Python

`pipex.cli.main(argv=None)` is the command itself. It takes the arguments
without the program name and returns the exit status.

The pipeline functions live in `pipex.runner`:

```python
import os
from pipex.runner import run_pipeline, run_heredoc, parse_command, CommandNotFound

status = run_pipeline("input.txt", ["grep error", "wc -l"], "count.txt", os.environ)

with open("notes.txt") as source:
    status = run_heredoc("EOF", ["cat", "sort"], "sorted.txt", os.environ, source)
```

- `run_pipeline(infile, commands, outfile, env)` accepts one or more commands.
  An empty list raises `ValueError`.
- `run_heredoc(limiter, commands, outfile, env, stdin=None)` reads the
  here-document from `stdin`. If `stdin` is not given, it reads from
  `sys.stdin`.
- In both functions, `env` is either a mapping or a sequence of `KEY=VALUE`
  strings.
- `parse_command(text)` splits a command string into its arguments, the same
  way the command line does.
- `CommandNotFound` is the exception used for a command that cannot be located
  or started. It carries the command's `name`.

Other helper modules:

- `pipex.paths`:
  - `find_path_dirs(env)` returns the `PATH` directories, each ending in `/`.
    It returns `None` when there is no `PATH`.
  - `resolve_command(name, path_dirs)` returns the program file to run, or
    `None`.
- `pipex.linereader`:
  - `read_line(stream)` reads one line, one character at a time. It returns
    `None` at end of input.
  - `read_heredoc(stream, limiter)` collects lines up to the limiter line.
- `pipex.strings` holds C-style string helpers: `split`, `strchr`, `strrchr`,
  `strjoin`, `strmapi`, `striteri`, `strncmp`, `strnstr`, `strtrim` and
  `substr`.
- `pipex.chars` holds ASCII character tests and conversions:
  - `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print`.
  - `to_lower` and `to_upper`.
  - `atoi`, which parses a leading integer with 32-bit wrapping, and `itoa`.
- `pipex.memory` holds byte-buffer operations on `bytearray` objects: `memset`,
  `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`, `strlcpy` and
  `strlcat`.
- `pipex.output` writes to a text stream: `put_char`, `put_str`, `put_endl`
  and `put_nbr`.

## What it does not do

`pipex` is not a shell. It does not interpret:

- quotes, escapes or variables;
- globbing;
- redirections inside a command string.

The here-document form supports only two commands.