"""Command line entry: load a UI package, show its contents and write it back."""

from __future__ import annotations

import argparse
import os
import sys

from tcuiedit.datafile import FileType
from tcuiedit.error import TCUIEditError
from tcuiedit.pkg.package import Package
from tcuiedit.project import Project
from tcuiedit.resources import load_resources
from tcuiedit.uitype import UIType, type_name


def _dir_prefix(path: str) -> str:
    if not path or path.endswith(("/", os.sep)):
        return path
    return path + os.sep


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tcuiedit",
        description="Load a trigger UI package, list its entries and write it out again.",
    )
    parser.add_argument("path", nargs="?", default="ui/ydwe/ui/", help="directory of the package")
    parser.add_argument("--name", default="ydwe", help="name of the package")
    parser.add_argument("--resources", default="res/core/", help="directory of the bundled resources")
    parser.add_argument("--output", default="tmp/", help="directory the package is written to")
    parser.add_argument("--match", default="integer", help="trigger type to look up and show")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    load_resources(_dir_prefix(args.resources))
    project = Project()
    package = Package(project, _dir_prefix(args.path), args.name)
    try:
        if not package.read_all(FileType.CLASSIC_TRIG_DATA):
            print(f"cannot read trigger data under {args.path}", file=sys.stderr)
            return 1
        package.read_all(FileType.CLASSIC_WE_STRINGS)
    except TCUIEditError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(package.name)
    for ui_type in sorted(package.sections):
        print("  " + type_name(ui_type))
        for entry in package.sections[ui_type]:
            print("    " + entry.form_display())

    matched = project.match_ui(args.match, UIType.TRIGGER_TYPE)
    if matched is not None:
        print(matched.form_display())

    package.base_path = _dir_prefix(args.output)
    for file_type in (FileType.CLASSIC_TRIG_DATA, FileType.CLASSIC_WE_STRINGS):
        if not package.write_file(file_type):
            print(f"cannot write {file_type.filename()} under {args.output}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())