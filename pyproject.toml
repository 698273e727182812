[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treehopper"
version = "0.1.0"
description = "Toy private set intersection protocols between two message-passing nodes"
requires-python = ">=3.10"
keywords = ["private set intersection", "protocol", "sha256", "salted hash", "state machine"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["treehopper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
