[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "foldercache"
version = "0.1.0"
description = "A small in-memory key-value cache organised in folders, served over a line-based TCP protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "key-value", "tcp", "server", "database", "in-memory"]
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
foldercache = "foldercache.server:main"

[tool.hatch.build.targets.wheel]
packages = ["foldercache"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
