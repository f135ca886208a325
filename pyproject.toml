[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cppdrills"
version = "0.1.0"
description = "Small data structures and text utilities: LRU cache, copy-on-write strings, flattened list views, timers and a command-driven text editor."
requires-python = ">=3.10"
dependencies = []
keywords = ["lru", "cache", "copy-on-write", "iterator", "text-editor", "command-pattern", "visitor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cppdrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
