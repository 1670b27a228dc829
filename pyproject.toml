[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lfc"
version = "0.1.0"
description = "Small collections and utilities: arrays, vectors, linked lists, queues, stacks, hash sets, hash maps and a mutable string type"
requires-python = ">=3.10"
dependencies = []
keywords = ["collections", "hashmap", "hashset", "linked list", "vector", "stack", "queue"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lfc"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
