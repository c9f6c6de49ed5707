[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labtasks"
version = "0.1.0"
description = "Small numeric, string and file-processing exercises with command-line front ends"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "numerical-methods", "taylor-series", "exercises", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labtasks-constants = "labtasks.constants:main"
labtasks-taylor = "labtasks.taylor:main"
labtasks-powers = "labtasks.powers:main"
labtasks-text = "labtasks.textops:main"
labtasks-numbers = "labtasks.number_tasks:main"
labtasks-bitbase = "labtasks.bitbase:main"
labtasks-employees = "labtasks.employees:main"
labtasks-arrays = "labtasks.arrays:main"

[tool.hatch.build.targets.wheel]
packages = ["labtasks"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
