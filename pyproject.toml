[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blaze"
version = "0.1.0"
description = "A command-line fuzzy finder that ranks and highlights matching lines."
requires-python = ">=3.10"
dependencies = []
keywords = ["fuzzy", "search", "finder", "filter", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blaze = "blaze.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["blaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
