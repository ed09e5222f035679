[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sedirlite"
version = "0.1.0"
description = "A small in-memory key-value server with strings, lists, sets and sorted sets"
requires-python = ">=3.10"
dependencies = []
keywords = ["key-value", "in-memory", "database", "server", "asyncio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Framework :: AsyncIO",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[project.scripts]
sedirlite = "sedirlite.server:main"

[tool.hatch.build.targets.wheel]
packages = ["sedirlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
