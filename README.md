# tcuiedit

Tools for working with the trigger UI definition files used by map editors:
`TriggerData.txt` (categories, types, type defaults, parameters, events,
conditions, actions and calls) and `WorldEditStrings.txt` (the `WESTRING_*`
display strings).

The package parses these files into a project of packages, keeps an index of
every definition by name, resolves display strings through the string table,
reports redefinitions, groups functions by category and return type, and
writes the data back out in the same format.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
tcuiedit [path] [--name NAME] [--resources DIR] [--output DIR] [--match TYPE]
```

The `tcuiedit` command:

1. loads the resource texts from `--resources` (default `res/core/`);
2. reads `TriggerData.txt` and then `WorldEditStrings.txt` from `path`
   (default `ui/ydwe/ui/`) into a package called `--name` (default `ydwe`);
3. prints the package name, each section name and the display text of every
   entry in it;
4. prints the display text of the trigger type named `--match`
   (default `integer`), if it is defined;
5. writes both files again into `--output` (default `tmp/`).

It exits with status 1 when the trigger data cannot be read or a line is
malformed. If the output directory does not exist, it reports that each file
cannot be written. See all options with `tcuiedit --help`.

## Library use

```python
from tcuiedit.project import Project
from tcuiedit.pkg.package import Package
from tcuiedit.datafile import FileType
from tcuiedit.uitype import UIType, FunctionType
from tcuiedit.resources import load_resources

load_resources("res/core/")

project = Project()
package = Package(project, "ui/ydwe/ui/", "ydwe")   # registers itself with the project

package.read_all(FileType.CLASSIC_TRIG_DATA)
package.read_all(FileType.CLASSIC_WE_STRINGS)

integer = project.match_ui("integer", UIType.TRIGGER_TYPE)
if integer is not None:
    print(integer.form_display())

for ui in package.section(UIType.TRIGGER_ACTION):
    print(ui.trig_data())

# Functions grouped by (lower-cased) category, and for calls by return type
for ui in package.category_map(FunctionType.CALL, "triggeractions", "integer"):
    print(ui.name)

package.base_path = "out/"
package.write_file(FileType.CLASSIC_TRIG_DATA)
```

Points worth knowing:

- Paths (`Package.base_path`, the resource directory) are prefixes joined to
  file names by plain concatenation, so they should end with a separator.
- Definitions are looked up case-insensitively. When several packages define
  the same name, `Project.match_ui` returns the one from the earliest package
  added to the project, and `UIBase.examine_name` returns an `Error` listing
  the other definitions.
- `Package.category_map` looks the category and return type up exactly as
  given, while the index stores them lower-cased.
- `Project.category_counts` and `Project.type_counts` map a lower-cased name to
  a pair (defined, number of functions referring to it).
- `UIBase.display()` resolves `WESTRING_*` references through the strings of
  every package in the project; `display(origin=True)` returns the raw text.
- Files are read and written as UTF-8. An entry without `=` raises
  `tcuiedit.error.FormatError`, as does an entry before any section header.
- Written trigger data starts with the licence text and one comment block per
  section taken from the resource directory (`LICENSE` and
  `typeDefineText/<SectionName>.txt`), followed by a generation timestamp.

## What it does not do

- There is no graphical editor: entries are inspected and changed through the
  library (attributes, `rename`, `set_category`, `Call.set_return_type`) and
  written back with `Package.write_file`.
- Only `TriggerData.txt` and `WorldEditStrings.txt` are read and written. The
  other file types named in `FileType` (`TriggerStrings.txt` and the
  `define.txt`, `event.txt`, `action.txt`, `call.txt` files) are not read.
- The `[DefaultTriggerCategories]` and `[DefaultTriggers]` sections are
  skipped when reading and are not written.