[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordhash"
version = "0.1.0"
description = "A chained hash table of lowercase words keyed by the sum of their letter positions"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "linked list", "words", "dictionary"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordhash = "wordhash.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordhash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
