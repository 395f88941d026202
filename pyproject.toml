[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ndisplays"
version = "0.1.0"
description = "Model of network display sinks and providers with de-duplication, selection lists and codec hints"
requires-python = ">=3.10"
dependencies = []
keywords = ["network displays", "wifi display", "sink", "provider", "screencast"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video :: Display",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ndisplays"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
