[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonmodel"
version = "0.1.0"
description = "A typed JSON value model with strict UTF-8 checks, copying, equality and recursive updates"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "utf-8", "data model", "deep copy"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsonmodel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
