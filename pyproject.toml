[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iconlist"
version = "2.3.0"
description = "Directory listing with file-type icons and colours, plus a small collection of data structures and algorithms."
requires-python = ">=3.10"
dependencies = []
keywords = ["ls", "directory", "listing", "icons", "tree", "graph", "heap", "matrix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
iconlist = "iconlist.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["iconlist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
