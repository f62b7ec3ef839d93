[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shtools"
version = "0.1.0"
description = "Shell building blocks: pattern-to-regex translation, PATH lookup, exit statuses, builtin flag parsing, getopts, read and shell options"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "glob", "pattern", "getopts", "posix", "bash", "path"]
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
    "Topic :: System :: Shells",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shtools"]

[tool.pytest.ini_options]
addopts = "-ra"
