[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shellds"
version = "0.1.0"
description = "String utilities, a balanced string-keyed tree and a doubly linked string list"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "avl", "tree", "linked-list", "environment", "shell"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shellds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
