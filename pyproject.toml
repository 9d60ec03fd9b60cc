[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algonotes"
version = "0.1.0"
description = "Classic algorithms and data structures: divide-and-conquer sorting, selection, inversions, Karger's min cut, Strassen multiplication, graph traversals and a dynamic array."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "divide-and-conquer",
    "sorting",
    "selection",
    "graphs",
    "karger",
    "strassen",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algonotes-karger = "algonotes.karger:main"

[tool.hatch.build.targets.wheel]
packages = ["algonotes"]

[tool.hatch.build.targets.sdist]
include = ["algonotes", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
