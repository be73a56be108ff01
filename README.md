# yala

A tiny structured logging facade. Code that wants to log talks to a
small, stable API; the application decides, in one place, which adapter
receives the log entries. The package has no dependencies outside the
standard library.

## Installation

```
pip install yala
```

## Logging with a fixed adapter

`yala.logger.with_adapter` builds an immutable `Logger`. Every `with_*`
method returns a new logger and leaves the original untouched. A logger
without an adapter logs nothing.

```python
from yala import console
from yala.logger import with_adapter

ctx = {}
log = with_adapter(console.stdout_adapter())

log.debug(ctx, "Hello")
log.info_fields(ctx, "Some info", {"field_name": "field_value"})
log.error_cause(ctx, "Some error", ValueError("boom"))

request_log = log.with_fields({"request_id": "123", "user": "gopher"})
request_log.debug(ctx, "request started")
request_log.with_field("rows_updated", 3).debug(ctx, "sql update executed")
```

Each level has a plain method and a `*_fields` method (`debug`, `info`,
`warn`, `error`); `error_cause` and `error_cause_fields` log at ERROR
with an explicit cause that overrides any error set with `with_error`.
`with_skipped_caller_frame` is for writing your own logging helpers.

The console adapter writes lines of the form

```
LEVEL message key=value key=value error=error
```

with fields and error encoded as logfmt (see `yala.logfmt.format_field`
and `yala.logfmt.format_fields`): values containing a space or `=` are
quoted, backslashes and double quotes are escaped, `None` becomes `nil`
and the string `"nil"` becomes `"nil"` in quotes.

The `ctx` argument is handed unchanged to the adapter, so adapters can
pull request-scoped data out of it.

## A global logger for a library

A library keeps a module-level `yala.global_.Global` and lets the
application plug an adapter in later:

```python
from yala.global_ import Global

log = Global()

def set_logger_adapter(adapter):
    log.set_adapter(adapter)
```

Child loggers made with `with_field`, `with_fields`, `with_error` and
`with_skipped_caller_frame` share the adapter of their root, so setting
the adapter on any of them updates all. Until an adapter is set, the
first warning or error prints a single line to standard output naming
the calling file and line and saying that the global logger is not
configured; passing `None` to `set_adapter` silences logging. A
`Global` is safe to use from several threads.

## Adapters

- `yala.console.stdout_adapter()` and `yala.console.stderr_adapter()`
  print to the console; `yala.console.WriterPrinter` prints to any
  text stream and ignores write errors.
- `yala.logadapter.adapter(logger)` sends formatted lines to a
  standard-library `logging.Logger` through `LoggingPrinter` (INFO
  level by default); passing `None` returns a no-op adapter.
- `yala.printer.PrinterAdapter` formats entries and hands them to any
  object with a `println(skip_caller_frames, msg)` method
  (`yala.printer.Printer`).
- `yala.noop.NoopAdapter` drops every entry and counts them in
  `dropped`.

Middleware adapters in `yala.middleware` wrap another adapter given as
`next_adapter`:

- `FilterOutMessages(prefix, next_adapter)` drops messages starting
  with `prefix`.
- `FilterByLevel(min_level, next_adapter)` drops entries less severe
  than `min_level`.
- `RenameFieldsAdapter(from_, to, next_adapter)` renames fields whose
  key is `from_`.
- `AddFieldFromContextAdapter(next_adapter, key="tag")` appends a field
  looked up under `key` when `ctx` is a mapping (otherwise `None`).
- `ReportCallerAdapter(next_adapter)` appends `file` and `line` fields
  naming the code that logged the entry.

## Writing an adapter

An adapter is any object with a `log(ctx, entry)` method; it satisfies
the `yala.entry.Adapter` protocol:

```python
class CollectingAdapter:
    def __init__(self):
        self.entries = []

    def log(self, ctx, entry):
        self.entries.append(entry)
```

An `Entry` has `level`, `message`, `fields` (a tuple of `Field(key,
value)`), `error` and `skipped_caller_frames`. Entries are immutable;
use `entry.with_field(...)` or `entry.with_fields(...)` to derive a new
one. Severity is a `yala.entry.Level` (`DEBUG`, `INFO`, `WARN`,
`ERROR`); compare levels with `more_severe_than`, and use
`yala.entry.level_name` to print a level, including unknown numbers.
Middleware should add one to `skipped_caller_frames` before passing an
entry on.

## What it does not do

The package ships no adapters for third-party logging libraries and
does no formatting beyond the logfmt lines above; output goes to a text
stream, a standard-library `logging.Logger`, or an adapter you write.

## Running the tests

```
pip install -e ".[test]"
pytest
```