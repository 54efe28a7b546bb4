[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "acyclic"
version = "1.0.0"
description = "Directed acyclic graphs with cached ancestry, ordered walks, dependency flows and JSON storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["dag", "graph", "directed acyclic graph", "topological sort", "transitive reduction"]
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

[project.scripts]
acyclic = "acyclic.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["acyclic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
