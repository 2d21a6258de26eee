[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "levelcheck"
version = "0.1.0"
description = "An English level test: grammar, writing, listening and speaking sections scored out of ten and combined into a CEFR level."
requires-python = ">=3.10"
dependencies = []
keywords = ["english", "cefr", "language test", "grammar", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: English",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
levelcheck = "levelcheck.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["levelcheck"]

[tool.pytest.ini_options]
addopts = "-ra"
