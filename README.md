# pipechain

`pipechain` runs a chain of commands joined by pipes. The first command reads
from an input file and the last one writes to an output file, as in the shell
line

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Commands

### `pipechain`: two commands

`pipechain` takes exactly four arguments:

```sh
pipechain infile "grep error" "wc -l" outfile
```

This behaves like `< infile grep error | wc -l > outfile`. The output file is
created with mode 0644 if needed, and truncated if it already exists.

### `pipechain-multi`: any number of commands

`pipechain-multi` takes at least four arguments. Every argument between the
input file and the output file is a command:

```sh
pipechain-multi infile "cat" "sort" "uniq -c" outfile
```

### Here-documents

If the first argument to `pipechain-multi` is `here_doc` and at least two
commands follow the limiter, the second argument is a limiter. Lines are read
from standard input until one of them equals the limiter. Those lines, without
the limiter line, become the input of the first command. The output file is
appended to rather than truncated:

```sh
pipechain-multi here_doc EOF "tr a-z A-Z" "cat" outfile
```

This behaves like `<< EOF tr a-z A-Z | cat >> outfile`. If standard input ends
before the limiter appears, the run fails with `Get_next_line error`. If there
are only four arguments, `here_doc` is taken as an ordinary input file name.

### How commands are run

Each command argument is split on spaces, and empty pieces are dropped. Quotes,
globs, variables and redirections are not interpreted. The program is looked
up through the search path. That path is the value of the first environment
entry whose `NAME=value` text contains `PATH`. The first `<dir>/<program>` that
is executable is run, with the remaining words as its arguments.

### Errors and exit status

Messages go to standard error, followed by the system's description where one
applies.

- A wrong number of arguments exits with status 1 and `Wrong number of arguments`.
- If the input file cannot be opened, `Error opening infile` is reported. The
  first command is not run, and the next command reads empty input.
- An earlier command that cannot be found (`command not found`) or started
  (`Executing program failed`) is reported. The command after it reads empty
  input.
- If the output file cannot be opened, or the last command cannot be found or
  started, the run exits with status 1.

Otherwise the exit status is that of the last command. A command killed by
signal N gives 128 + N.

## Library use

The pieces can also be used from Python:

```python
import os

from pipechain.config import PipelineConfig, read_heredoc
from pipechain.executor import run_pipeline, find_executable, split_command
from pipechain.errors import PipexError

config = PipelineConfig.from_argv(
    ["prog", "in.txt", "cat", "wc -l", "out.txt"], os.environ
)
print(config.commands())        # ['cat', 'wc -l']
status = run_pipeline(config)   # exit status of the last command
```

- `pipechain.config`
  - `PipelineConfig.from_argv(argv, env)` takes a full argument vector with
    the program name first. It raises `PipexError` when there are fewer than
    five entries.
  - `PipelineConfig` has `infile`, `limiter`, `outfile`, `here_doc` and
    `commands()`.
  - `is_heredoc(word)` and `matches_limiter(limiter, line)` are the tests
    `pipechain-multi` uses to recognise here-document mode and its end line.
  - `read_heredoc(limiter, stream)` collects the lines before the limiter line.
- `pipechain.executor`
  - `find_executable(command, env)` does the path lookup described above.
  - `split_command(word)` splits a command argument into words.
  - `run_pipeline(config, heredoc_data=None)` runs the chain. In here-document
    mode its input is `heredoc_data`.
- `pipechain.errors.PipexError` carries `message` and the exit status `code`.
- `pipechain.cli.main(argv=None)` and `pipechain.cli.main_bonus(argv=None)`
  are the two commands. Each returns an exit status.

Smaller helpers:

- `pipechain.linereader.LineReader(stream, buffer_size=10000)` reads lines,
  newline included, from a file object or a file descriptor, one chunk at a
  time.
  - `read_line()` returns `None` at the end of input.
  - `discard()` drops any buffered text.
  - Iterating over the reader yields its lines.
- `pipechain.cformat.cformat(template, *args)` is a printf-style formatter for
  `%c %s %p %d %i %u %x %X %%`. Integers wrap to 32 bits.
  `cprintf(template, *args, stream=None)` writes the result and returns its
  length.
- `pipechain.strutil` has string helpers with C library semantics: `split`,
  `strcmp`, `strncmp`, `strnstr`, `atoi`, `atoi_base`, `itoa`, `strtrim`,
  `substr`, `strlcpy` and `strlcat`.

## What it does not do

`pipechain` is not a shell:

- It has no quoting, no `||`/`&&`, no background jobs, and no redirections
  other than the input file and output file given on the command line.
- Commands are always looked up through the search path; a command given as a
  path is joined onto each search directory rather than run directly.