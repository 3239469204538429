# pipex

`pipex` runs a chain of commands connected by pipes. The first command reads
from a file (or from a here-document), each command's output goes to the
next one's input, and the last command's output goes to a file. It works
like this shell line:

```sh
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

## Installation

```sh
pip install .
```

Running the tests needs the `test` extra:

```sh
pip install ".[test]"
pytest
```

## Usage

### Files in, file out

```sh
pipex infile "cmd1 args" "cmd2 args" ... "cmdN args" outfile
```

At least two commands are needed. Each command is split on spaces, and its
first word is looked up, in order, in the directories listed in `PATH`. If
the argument count is wrong or a command cannot be found there, `pipex`
prints a message to standard error, exits with status 1 and runs nothing.

The output file is created if it does not exist and truncated if it does.
The input file is opened first; if it cannot be opened, the output file is
still created, an error is printed and the exit status is 1.

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

### Here-document

```sh
pipex here_doc LIMITER "cmd1 args" "cmd2 args" outfile
```

`pipex` writes a `heredoc> ` prompt to standard output and reads lines from
standard input until a line starts with `LIMITER` or input ends. The
collected text becomes the input of `cmd1`, and `cmd2` writes into
`outfile`, which is opened in append mode, like
`cmd1 << LIMITER | cmd2 >> outfile`. This mode takes exactly two commands.

### Exit status

`pipex` exits with 0 once the pipeline has run, whatever the commands' own
exit statuses were, and with 1 on a usage error or a file that cannot be
opened.

## What it does not do

- Commands are split on single spaces only: there is no quoting, escaping,
  globbing or variable expansion.
- Command names are looked up only through `PATH`; a name containing a
  slash is not run directly.
- Only standard input and standard output are redirected; standard error of
  each command goes to the terminal.

## Using it from Python

The entry point is `pipex.cli.main`, which takes the argument list (without
the program name) and returns the exit status:

```python
from pipex.cli import main

status = main(["input.txt", "grep error", "wc -l", "count.txt"])
```

`pipex.cli` also offers the steps one at a time:

- `parse_args(argv)` builds a `PipexConfig` (`outfile`, `commands`,
  `infile`, `limiter`, and the `heredoc` property), raising `UsageError`
  when the argument count is wrong.
- `validate_args(argv, env)` does the same and also checks that every
  command can be found through `env`'s `PATH`.
- `open_output(config)` opens the output file for writing (append for a
  here-document, truncate otherwise).
- `read_heredoc(limiter, stdin=None, prompt_stream=None)` collects
  here-document text.
- `run_pipeline(config, env)` starts the commands and returns their exit
  statuses in order.

`pipex.paths` resolves commands against `PATH`: `search_path`,
`find_executable` and `command_exists`.

The package also includes a few helpers it uses internally:

- `pipex.cformat`: a `printf`-style formatter supporting `%c %s %p %d %i %u
  %x %X %%` with the `-`, `0`, `.`, `#`, space and `+` flags, a width and a
  precision (`parse_directive`, `format_string`, and `printf`, which writes
  to a stream and returns the number of characters written).
- `pipex.linereader.LineReader`: reads lines, each keeping its newline, from
  a text or binary stream in chunks of a chosen size; `read_line` returns
  `None` at the end, and the reader can be iterated.
- `pipex.numbers`: `base_digits`, `to_base` and `split_sign` for rendering
  integers in decimal or hexadecimal.
- `pipex.textutils`: small string helpers `split`, `strtrim`, `strnstr`,
  `strncmp`, `atoi` and `itoa`.