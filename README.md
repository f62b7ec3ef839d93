# shtools

Pieces of a POSIX/Bash-style shell, usable on their own from Python.
The package has no dependencies outside the standard library.

## Modules

### `shtools.pattern`

Turns shell wildcard patterns into Python regular expressions.

- `Mode` is a flag enum: `SHORTEST` makes `*` non-greedy, `FILENAMES` keeps
  `*` and `?` from matching `/` (only `**` does, and `**/` matches any number
  of directories), `BRACES` enables `{a,b}` alternation and `{1..4}` ranges.
- `regexp(pat, mode)` returns the expression. It raises `PatternError`
  (a `ValueError`) for malformed patterns: a trailing backslash, an unclosed
  `[`, a reversed range such as `[z-a]`, an unknown `[[:class:]]`, or
  collating elements like `[[.x.]]`.
- `has_meta(pat, mode)` reports whether the pattern holds an unescaped `*`,
  `?` or `[` (or `{` with `BRACES`).
- `quote_meta(pat, mode)` escapes those characters and backslashes so the
  pattern matches its literal text.

### `shtools.lookpath`

Finds executables the way a shell does, from an environment mapping.

- `look_path_dir(cwd, env, file)` searches `env["PATH"]`, with empty and
  `.` elements meaning the directory `cwd`; a name holding a slash is looked
  up directly. `look_path(env, file)` uses `env["PWD"]` as the directory.
  Both raise `LookPathError` when nothing suitable is found.
- `check_stat(dir, file)` and `find_executable(dir, file, exts)` check a
  single candidate: it must exist, not be a directory and, outside Windows,
  have an execute bit set.
- `split_list(path)`, `path_exts(env)` and `win_has_ext(file)` are the
  helpers for PATH splitting and, on Windows, `PATHEXT` extensions.

### `shtools.exitstatus`

- `ExitStatus` is an exception holding an exit code kept to one byte;
  `str()` gives `"exit status N"`.
- `new_exit_status(status)` creates one; `is_exit_status(err)` returns the
  code carried by `err` or by any exception in its cause/context chain, or
  `None`.

### `shtools.flags`

- `FlagParser(args)` reads builtin-style flags: `-a`, `+a`, combined `-ab`,
  stopping at the first non-flag or after `--`. Use `more()`, `flag()`,
  `value()` and `args()`, or iterate over it to get the flags.
- `Getopts` holds the `getopts` builtin state; `next(optstr, args)` returns a
  `GetoptsResult(opt, optarg, done)`, with `"?"` for an unknown option and
  `":"` for a missing argument.
- `atoi(s)` parses a decimal integer, giving 0 for invalid input and clamping
  to the 64-bit range.

### `shtools.readline`

- `read_line(stream, raw)` reads one line byte by byte and returns it as
  `bytes` without the newline. Unless `raw` is set, a backslash before a
  newline continues the line. It raises `ReadLineError` when there is no
  stream or input ends before any byte was read. Text and binary streams are
  both accepted.

### `shtools.options`

- `ShellOptions` holds the shell options (`allexport`, `errexit`, `noexec`,
  `noglob`, `nounset`, `pipefail`) and the bash options (`expand_aliases`,
  `globstar`, `nullglob`), all off at first. It has `by_flag`, `by_name`,
  `get` and `set`.
- `apply_params(args, out)` behaves like the `set` builtin: `-e`/`+e`,
  `-o name`/`+o name`, and listings for a bare `-o` or `+o` written to `out`.
  It returns the new positional parameters, or `None` when they should be
  kept.
- `shopt(args, out)` behaves like the `shopt` builtin with `-s`, `-u` and
  `-o`.
- Both raise `OptionError`, whose `status` attribute holds the exit status a
  shell would report (2 for a bad flag, 1 for an unknown `shopt` name).
- `format_opt_line(name, enabled)` formats a line such as `"errexit\ton\n"`.

### `shtools.permissions`

- `has_permission_to_dir(path)` reports whether the current user may search
  the directory, using the owner, group and other execute bits. It is always
  true on Windows and for the super-user, and raises `OSError` if the path
  cannot be examined.

## Example

```python
import re
from shtools.pattern import Mode, regexp

expr = regexp("foo?bar*", Mode(0))   # "foo.bar.*"
assert re.match(expr, "foo bar baz")

expr = regexp("{3..5}", Mode.BRACES)  # "(?:3|4|5)"
```

## What this package does not do

It is a library of parts, not a shell. It does not parse shell scripts, run
commands or builtins, or keep variables and functions, and it provides no
command to run.

## Tests

```
pip install -e .[test]
pytest
```