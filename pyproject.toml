[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbitkeys"
version = "0.1.0"
description = "Keyboard shortcut cheat sheets for applications, printed in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["shortcuts", "keyboard", "cheat-sheet", "desktop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
orbitkeys = "orbitkeys.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["orbitkeys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
