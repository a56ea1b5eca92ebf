[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "civsve"
version = "0.1.0"
description = "Read, inspect and write Civilization (1991) SVE save game files"
requires-python = ">=3.10"
dependencies = []
keywords = ["civilization", "civ1", "save game", "sve", "binary format"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
civsve = "civsve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["civsve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
