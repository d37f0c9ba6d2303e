[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studentdb"
version = "0.1.0"
description = "A small SQLite-backed register of student records with add, list, search and delete."
requires-python = ">=3.10"
dependencies = []
keywords = ["students", "sqlite", "records", "register", "database"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studentdb = "studentdb.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["studentdb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
