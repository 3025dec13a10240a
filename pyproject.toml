[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "workbench"
version = "0.1.0"
description = "A small console workbench that runs line-based scripts for logging and printing"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "scripting", "logging", "console", "workbench"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
workbench = "workbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["workbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
