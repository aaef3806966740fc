[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cds"
version = "0.1.0"
description = "Classic data structures: growable vector, singly linked list, stack, queue and comparator-based sort and search."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "vector", "linked list", "stack", "queue", "sort", "binary search"]
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["cds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
