[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcuiedit"
version = "0.1.0"
description = "Read, inspect and rewrite trigger UI definition files (TriggerData.txt, WorldEditStrings.txt) for map editors"
requires-python = ">=3.10"
dependencies = []
keywords = ["trigger", "triggerdata", "worldedit", "ydwe", "map-editor", "ui"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tcuiedit = "tcuiedit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tcuiedit"]

[tool.hatch.build.targets.sdist]
include = ["tcuiedit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
