[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "listbench"
version = "0.1.0"
description = "Array, linked-list and binary-search-tree list structures with a timing benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "binary search tree", "queue", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
listbench = "listbench.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["listbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
