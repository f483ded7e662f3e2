[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weatherlib"
version = "0.1.0"
description = "Blocking client for the weatherapi.com HTTP API with typed weather models"
requires-python = ">=3.10"
dependencies = [
    "requests",
    "pillow",
]
keywords = ["weather", "forecast", "weatherapi", "client", "dataclasses"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["weatherlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
