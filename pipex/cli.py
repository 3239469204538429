"""Run a chain of commands connected by pipes, like a shell pipeline.

Usage::

    pipex infile cmd1 cmd2 ... cmdN outfile
    pipex here_doc LIMITER cmd1 cmd2 outfile
"""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from contextlib import ExitStack
from dataclasses import dataclass
from typing import IO, BinaryIO, Mapping, Sequence

from pipex.cformat import printf
from pipex.linereader import LineReader
from pipex.paths import command_exists, find_executable
from pipex.textutils import split, strncmp

HEREDOC_KEYWORD = "here_doc"
HEREDOC_PROMPT = "heredoc> "
_HEREDOC_ARGC = 5
_MIN_ARGC = 4
_FILE_MODE = 0o777


class UsageError(Exception):
    """The command line does not describe a runnable pipeline."""


@dataclass(frozen=True)
class PipexConfig:
    """What to run: the commands and where their input and output go."""

    outfile: str
    commands: tuple[str, ...]
    infile: str | None = None
    limiter: str | None = None

    @property
    def heredoc(self) -> bool:
        return self.limiter is not None


def parse_args(argv: Sequence[str]) -> PipexConfig:
    """Build a configuration from the arguments (program name excluded)."""
    args = list(argv)
    if not args:
        raise UsageError("missing arguments")
    if args[0].startswith(HEREDOC_KEYWORD):
        if len(args) != _HEREDOC_ARGC:
            raise UsageError(
                f"usage: {HEREDOC_KEYWORD} LIMITER cmd1 cmd2 outfile"
            )
        return PipexConfig(
            outfile=args[-1], commands=tuple(args[2:-1]), limiter=args[1]
        )
    if len(args) < _MIN_ARGC:
        raise UsageError("usage: infile cmd1 cmd2 ... cmdN outfile")
    return PipexConfig(outfile=args[-1], commands=tuple(args[1:-1]), infile=args[0])


def validate_args(argv: Sequence[str], env: Mapping[str, str]) -> PipexConfig:
    """Parse the arguments and check that every command can be found."""
    config = parse_args(argv)
    for command in config.commands:
        if not command_exists(command, env):
            raise UsageError(f"command not found: {command}")
    return config


def open_output(config: PipexConfig) -> BinaryIO:
    """Open the output file: appended to for a here-document, truncated otherwise."""
    flags = os.O_WRONLY | os.O_CREAT
    flags |= os.O_APPEND if config.heredoc else os.O_TRUNC
    fd = os.open(config.outfile, flags, _FILE_MODE)
    return os.fdopen(fd, "wb")


def read_heredoc(
    limiter: str,
    stdin: IO[str] | None = None,
    prompt_stream: IO[str] | None = None,
) -> str:
    """Collect lines from ``stdin`` until one starts with ``limiter``.

    A prompt is written before every line; the limiter line is not kept.
    """
    source = sys.stdin if stdin is None else stdin
    prompt = sys.stdout if prompt_stream is None else prompt_stream
    reader = LineReader(source, 1)
    limit = len(limiter.encode("utf-8"))
    lines: list[str] = []
    while True:
        printf(HEREDOC_PROMPT, file=prompt)
        prompt.flush()
        line = reader.read_line()
        if line is None:
            break
        if strncmp(line, limiter, limit) == 0:
            break
        lines.append(line)
    return "".join(lines)


def _resolve(config: PipexConfig, env: Mapping[str, str]) -> list[tuple[str, list[str]]]:
    programs = []
    for command in config.commands:
        path = find_executable(command, env)
        if path is None:
            raise FileNotFoundError(errno.ENOENT, "command not found", command)
        programs.append((path, split(command, " ")))
    return programs


def run_pipeline(config: PipexConfig, env: Mapping[str, str]) -> list[int]:
    """Run the configured commands and return their exit statuses in order.

    The input file is opened before the output file, and the output file is
    created even when the input cannot be opened; the input error is then
    raised.
    """
    programs = _resolve(config, env)
    child_env = dict(env)
    with ExitStack() as stack:
        source: BinaryIO | None = None
        input_error: OSError | None = None
        if config.infile is not None:
            try:
                source = stack.enter_context(open(config.infile, "rb"))
            except OSError as exc:
                input_error = exc
        sink = stack.enter_context(open_output(config))
        if input_error is not None:
            raise input_error
        heredoc_data = (
            read_heredoc(config.limiter).encode("utf-8") if config.heredoc else None
        )

        processes: list[subprocess.Popen] = []
        try:
            upstream: IO[bytes] | None = source
            last = len(programs) - 1
            for index, (path, args) in enumerate(programs):
                proc = subprocess.Popen(
                    args,
                    executable=path,
                    stdin=subprocess.PIPE if upstream is None else upstream,
                    stdout=sink if index == last else subprocess.PIPE,
                    env=child_env,
                )
                if index > 0 and upstream is not None:
                    upstream.close()
                processes.append(proc)
                upstream = proc.stdout
        except BaseException:
            for proc in processes:
                proc.kill()
                proc.wait()
            raise

        if heredoc_data is not None and processes and processes[0].stdin is not None:
            try:
                processes[0].stdin.write(heredoc_data)
            except BrokenPipeError:
                pass
            finally:
                try:
                    processes[0].stdin.close()
                except BrokenPipeError:
                    pass
        return [proc.wait() for proc in processes]


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    env = os.environ
    try:
        config = validate_args(args, env)
    except UsageError as exc:
        print(f"pipex: {exc}", file=sys.stderr)
        return 1
    try:
        run_pipeline(config, env)
    except OSError as exc:
        print(f"pipex: {exc}", file=sys.stderr)
        return 1
    return 0