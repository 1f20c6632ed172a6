[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smartvend"
version = "0.1.0"
description = "Vending machine simulator built on an extended finite state machine with pluggable strategies"
requires-python = ">=3.10"
dependencies = []
keywords = ["vending-machine", "state-machine", "efsm", "strategy-pattern", "abstract-factory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smartvend = "smartvend.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["smartvend"]

[tool.pytest.ini_options]
addopts = "-ra"
