[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsatank"
version = "0.1.0"
description = "Linked list variants and a recursive Tower of Hanoi solver"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "linked-list",
    "circular-linked-list",
    "doubly-linked-list",
    "recursion",
    "tower-of-hanoi",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsatank-demo = "dsatank.demo:main"
dsatank-hanoi = "dsatank.hanoi:main"

[tool.hatch.build.targets.wheel]
packages = ["dsatank"]

[tool.hatch.build.targets.sdist]
include = ["dsatank", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["dsatank"]
