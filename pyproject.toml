[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tuiscaffold"
version = "1.0.0"
description = "A terminal UI layout scaffold with a styled header, a scrollable viewport and a footer"
requires-python = ">=3.10"
keywords = ["tui", "terminal", "layout", "viewport", "scrolling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]
dependencies = [
    "blessed",
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tuiscaffold = "tuiscaffold.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tuiscaffold"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
