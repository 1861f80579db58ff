[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iniread"
version = "1.0.0"
description = "A small, forgiving INI reader with lookup queries and an event-driven streaming parser."
requires-python = ">=3.10"
dependencies = []
keywords = ["ini", "config", "configuration", "parser", "streaming"]
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
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
iniread-demo = "iniread.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["iniread"]

[tool.pytest.ini_options]
addopts = "-ra"
