# filejanitor

filejanitor tidies a single directory. It looks at the regular files directly
inside it and moves each one into a sub-folder named after its extension.

- `report.PDF` and `notes.pdf` both go to `pdf/`
- `photo.jpg` goes to `jpg/`
- `Makefile` and `.bashrc` have no extension and go to `no_extension/`

Extensions are compared in lower case. A leading dot starts a name rather than
an extension. Sub-directories are left alone, and so are the files inside them.

If a file with the same name is already in the target folder, the file being
moved gets a numbered name such as `notes (1).pdf`, `notes (2).pdf`, and so on
up to `notes (99).pdf`. If all of those names are taken too, the existing file
at the original target name is replaced. A move whose source and destination
are the same path is skipped.

## Installation

```
pip install .
```

## Usage

```
filejanitor [DIRECTORY]
```

If you leave out `DIRECTORY`, the current directory is tidied. The command
works in three phases and reports on each one:

1. **Scanning**: counts the files it found and any errors it met while
   reading the directory. If there are no files, it stops here.
2. **Planning**: prints every planned move as
   `[PLAN] name -> destination (Bucket: ext)`.
3. **Execution**: moves the files, then prints how many moves were processed,
   how many succeeded, how many failed and how many were skipped. It then lists
   each failure and the reason for it.

The command exits with status 1 if the directory does not exist. Otherwise it
exits with status 0, even when some moves failed.

## What it does not do

- It does not ask for confirmation: **files are moved as soon as the command
  runs**. There is no dry-run option.
- It does not descend into sub-directories.
- It cannot undo a run.

## Using it from Python

```python
from pathlib import Path

from filejanitor.scanner import collect_files
from filejanitor.planner import generate_plan
from filejanitor.executor import execute_plan

root = Path("downloads").absolute()
collection = collect_files(root)      # FileCollection(files=[...], errors=[...])
plan = generate_plan(collection.files, root)
for move in plan:
    print(move.source, "->", move.destination, move.bucket_name)

report = execute_plan(plan)
print(report.processed_count, report.success_count,
      report.failure_count, report.skipped_count)
for failure in report.failures:
    print(failure.source, failure.destination, failure.error)
```

Other pieces that can be used on their own:

- `filejanitor.planner.normalize_extension(path)` and
  `filejanitor.planner.bucket_name(extension)`
- `filejanitor.executor.resolve_collision(target)`,
  `filejanitor.executor.candidate_paths(target)` and
  `filejanitor.executor.process_operation(move)`, which returns an
  `OperationResult` from `filejanitor.models`
- `filejanitor.safe_fs`: `safe_scan`, `exists`, `rename` and
  `create_directories`

## Running the tests

```
pip install ".[test]"
pytest
```