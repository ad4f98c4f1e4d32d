[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shadepay"
version = "0.1.0"
description = "In-memory merchant payment ledger with merchants, roles, pausing, merchant keys and upgrade tracking"
requires-python = ">=3.10"
dependencies = []
keywords = ["payments", "merchants", "ledger", "access-control", "roles"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shadepay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
