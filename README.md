# pilotkit

Small, dependable helpers for scripts that manage files on POSIX
systems. Everything uses only the standard library.

## Installation

```
pip install pilotkit
```

To run the test suite:

```
pip install "pilotkit[test]"
pytest
```

## What it offers

### Path components — `pilotkit.pathparts`

Purely lexical: nothing is looked up on disk. A component that comes out
empty raises `ValueError`.

```python
from pilotkit.pathparts import basename, extension, stem, parent, join_path

basename("/srv/data/report.tar.gz")   # "report.tar.gz"
extension("/srv/data/report.tar.gz")  # ".gz"
stem("/srv/data/report.tar.gz")       # "report.tar"
parent("/srv/data/report.tar.gz")     # "/srv/data"
join_path("/srv/", "/data", "x.txt")  # "/srv/data/x.txt"
join_path(["a", "b"])                 # "a/b"
```

`join_path` takes either several strings or one list or tuple of
strings. It needs at least two segments, none of them empty, and puts
exactly one `/` between neighbours.

### Checksums — `pilotkit.checksums`

```python
from pilotkit.checksums import md5sum, blake2b512sum, blake2s256sum, file_checksum

md5sum("archive.bin")            # 32 lowercase hex characters
blake2b512sum("archive.bin")     # 128 hex characters
blake2s256sum("archive.bin")     # 64 hex characters
file_checksum("archive.bin", "sha256")
```

A file that cannot be read raises `OSError`. An unknown algorithm name
raises `ValueError`.

### Filesystem queries — `pilotkit.fsinfo`

- `current_dir()` returns the working directory.
- `change_dir(path)` resolves `path` to its canonical form and moves there.
- `is_dir(path)` and `is_file(path)` tell whether the path is a directory
  or a regular file. An empty path raises `ValueError`.
- `file_exists(path)` answers like `is_file`, but an empty path gives
  `False`.
- `file_size(path)` returns the size in bytes of a regular file.

For the query functions, a path that does not exist is an ordinary
`False`, not an error. Other failures, such as denied access, raise
`OSError`.

### Copying — `pilotkit.copying`

`copy_file(source, destination)` copies one file and overwrites the
destination. It refuses a destination that is a directory.

`copy_tree(source, destination, continue_on_error=True)` copies a whole
directory tree:

- Symbolic links are recreated after the files are copied.
- An absolute link target that points inside the source tree is
  redirected into the destination. Other targets are kept as they are.
- A destination equal to or inside the source raises `ValueError`.
- With `continue_on_error`, each problem is written to standard error as
  a warning. The copy then goes on and ends by raising
  `CopyWarningsError`, whose `warnings` attribute lists the messages.
  Without it, the first problem raises `OSError`.

### Ownership and permissions — `pilotkit.attributes`

`get_attributes(path)` returns a frozen `FileAttributes` with these
fields:

- `mode`: the `0o777` permission bits
- `owner`: the UID
- `group`: the GID

`set_attributes(path, owner, group, mode=None)` changes owner and group,
and the permissions if a mode is given. Negative IDs raise `ValueError`.

### Searching — `pilotkit.finder`

```python
from pilotkit.finder import find

find("project", kind="f", name=r".*\.py", maxdepth=2)
```

Depth 0 is the direct children of the root, and `mindepth` and
`maxdepth` bound the depths searched. `kind` is `"f"` for regular files
or `"d"` for directories.

`name`, `iname` and `path` are regular expressions:

- `name` must match the whole file name.
- `iname` must match the whole file name, ignoring case.
- `path` may match anywhere in the full path.

Results come in sorted pre-order.

### Listing — `pilotkit.listing`

```python
from pilotkit.listing import list_files, FileIterator

list_files("project", recursive=True)   # paths relative to "project"

files = FileIterator("project", recursive=True)
for path in files:
    print(path)
files.close()
```

`FileIterator` reads the file list when it is created. `has_next()` tells
whether entries remain. After `close()`, further iteration raises
`ValueError`.

### Deep copies — `pilotkit.tables`

`deep_copy(value, max_depth=75)` copies nested dictionaries and lists,
keeping shared and cyclic references. Beyond the depth limit it raises
`TooDeepError`.

## What it does not do

pilotkit is a library only; it installs no command-line tool. It does
not create symbolic links on request (only `copy_tree` recreates
existing ones). It does not start or supervise external programs.