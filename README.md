# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file, the second writes to an output file. It does the job of this
shell line:

```sh
< file1 cmd1 | cmd2 > file2
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipex file1 cmd1 cmd2 file2
```

Each command is passed as one argument. It is split on spaces into a
program name and its arguments. Runs of spaces count as one, and quotes are
not interpreted.

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

A program name is first tried as given, relative to the current directory.
If that is not an executable file, each directory of the `PATH` environment
variable is tried in order. The commands run with the current environment.

The output file is created if it does not exist and truncated if it does,
with mode `0644`.

### Messages and exit status

Both commands are started even if one of them fails to start; a failure is
reported on standard error as it happens:

- `<name>: command not found` when a program cannot be found, and
  `: command not found` when a command argument is empty or only spaces.
- `<name>: command not executable` when a program is found in `PATH` but
  cannot be executed.
- `Error: <reason>` when a file cannot be opened or a program cannot be
  started.

The exit status is that of the second command:

- its own exit status when it runs (`0` if it is ended by a signal);
- `127` when it cannot be found, `126` when it is not executable;
- `1` when the output file cannot be opened or the program cannot be started.

A failure of the first command is reported but does not change the exit
status. A wrong number of arguments prints
`Error. Expected: ./pipex file1 cmd1 cmd2 file2` and exits with `1`.

## Library use

The pieces behind the command can also be used from Python:

- `pipex.cli.parse_input(argv, env)` builds a `Job` (input file, the two
  commands as tuples of words, output file and the `PATH` directories) from
  the four arguments; `pipex.cli.run_pipeline(job, env)` runs it and returns
  the exit status. `pipex.cli.main(argv)` does both and reports errors.
- `pipex.command.path_dirs(env)` lists the non-empty `PATH` directories of a
  mapping, and `pipex.command.find_command(name, paths)` resolves a program
  name, raising `PipexError` with status 126 or 127.
- `pipex.errors.PipexError(message, code)` carries a message and an exit
  status; `pipex.errors.report_error(error, stream)` writes it to the stream
  (standard error by default) and returns the status.
- `pipex.linereader.LineReader(fd, buffer_size)` reads a file descriptor in
  chunks of `buffer_size` bytes (64 by default); `read_line()` returns the
  next line with its newline, or `None` at end of input, and iterating gives
  every line. `pipex.linereader.read_lines(fd, buffer_size)` yields the
  remaining lines.
- `pipex.strutil` holds string helpers: `split_words` (split on one
  character, dropping empty pieces), `atoi` (leading decimal integer,
  wrapped to 32 bits), `itoa`, `strtrim`, `strnstr` (index of a substring
  within the first characters, or `-1`) and `strncmp`.

## Running the tests

```sh
pip install ".[test]"
pytest
```