[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "valuesources"
version = "0.1.0"
description = "Ordered lookups of configuration values from environment variables, files and nested maps"
requires-python = ">=3.10"
dependencies = []
keywords = ["configuration", "environment", "cli", "flags", "value source"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["valuesources"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
