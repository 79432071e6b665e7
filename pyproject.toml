[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "turtlegfx"
version = "0.1.0"
description = "A small turtle-graphics language: syntax tree, interpreter, pretty-printer and an animated drawing viewer."
requires-python = ">=3.10"
keywords = ["turtle", "graphics", "interpreter", "logo", "drawing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Education",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
turtlegfx-viewer = "turtlegfx.viewer:main"

[tool.hatch.build.targets.wheel]
packages = ["turtlegfx"]

[tool.pytest.ini_options]
addopts = "-ra"
