[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termwin"
version = "1.0.0"
description = "Terminal styles and colors, an off-screen character window that renders to escape sequences, and a small text editor core"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "ansi", "escape-codes", "color", "tui", "editor", "syntax-highlighting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["termwin"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
