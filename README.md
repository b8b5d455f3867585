# packkit

Small building blocks for tools that load and render template packs:
a logging interface, title casing, interrupt handling, a directory walker
that follows symlinks, directory copying, template helper functions and a
threaded terminal spinner. It has no third-party dependencies.

## Install

```
pip install packkit
```

To run the tests:

```
pip install "packkit[test]"
pytest
```

## Modules

### `packkit.logger`

`Logger` is an abstract interface with `debug`, `info`, `warning`, `error`,
`trace` and `error_with_context(err, sub, *lines)`.

- `default()` returns a `FmtLogger`, which prints every message to
  standard output. `error_with_context` prints `err: <err>`, then `sub`,
  then each extra line.
- `new_test_logger(log)` returns a `TestLogger`, which passes each message
  (one call per line) to the callable `log`.

### `packkit.title`

`title(s)` capitalises each word and lower-cases the rest:
`title("hello world") == "Hello World"`.

### `packkit.signalcontext`

`with_interrupt(parent=None)` is a context manager that yields a
`threading.Event`. The event is set when the process receives SIGINT, when
the optional `parent` event is set, or when the block is left. The SIGINT
handler is only installed from the main thread, and the previous handler is
restored on exit.

```python
from packkit.signalcontext import with_interrupt

with with_interrupt() as cancelled:
    while not cancelled.is_set():
        step()
```

### `packkit.walk`

`walk(root, walk_fn)` visits `root` and everything below it, in sorted
order within each directory, calling `walk_fn(path, info, err)` where
`info` is an `os.stat_result` (or `None`) and `err` an `OSError` (or
`None`). Symbolic links are resolved and followed, including links to
directories. Raise `SkipDir` from `walk_fn` on a directory to skip its
contents; any other exception ends the walk and propagates.

### `packkit.filesystem`

- `copy_file(source_path, destination_path, logger)` copies content and
  permission bits, fsyncing the destination.
- `copy_dir(source_dir, destination_dir, overwrite, logger)` copies a tree
  recursively and skips symbolic links. Without `overwrite` the destination
  must not exist (`FileExistsError`) and is created with the source
  directory's permissions. A source that is not a directory raises
  `NotADirectoryError`.
- `maybe_create_destination_dir(path, *, mode=0o755, err_on_exists=False)`
  creates a directory and its parents if missing, or raises
  `FileExistsError` when it exists and `err_on_exists` is set.

Failures are reported to `logger.debug` before being raised.

### `packkit.funcs`

- `to_string_list(value)` renders a list or tuple as an HCL list of quoted
  strings: `to_string_list(["dc1", "dc2"]) == '["dc1", "dc2"]'`. Any other
  value is quoted as a single element.
- `file_contents(path)` returns a file's text, raising
  `OSError("failed to read <path>: ...")` on failure.

### `packkit.spinner`

`Spinner(chars, delay, *, parent=None, prefix="", suffix="", final_msg="",
color=None, hide_cursor=False, writer=None)` draws frames from `chars`
every `delay` seconds on a background thread, writing to `writer`
(standard output by default). It can be used as a context manager:

```python
from packkit.spinner import CHAR_SETS, Spinner

with Spinner(CHAR_SETS[9], 0.1, suffix=" working", final_msg="done\n"):
    do_work()
```

Other methods: `start`, `stop`, `restart`, `active`, `reverse`,
`set_color(*names)` (raises `InvalidColorError` for unknown names such as
anything outside `red`, `fgHiBlue`, `bgGreen`, `bold` and the like),
`update_speed`, `update_char_set`, `lock` and `unlock`. The `pre_update`
and `post_update` attributes may hold callables run around each frame.
Colour is only emitted when standard output is a terminal and `NO_COLOR`
is not set.

`CHAR_SETS` holds the built-in frame sets, and
`generate_number_sequence(n)` returns `["0", ..., str(n - 1)]`.

## What it does not do

packkit does not load pack directories, parse variable files, or render
templates, and it does not talk to a scheduler API. It ships no
command-line program; it is a library to build such tools with.