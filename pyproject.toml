[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "packkit"
version = "0.1.0"
description = "Helpers for template-pack tools: logging, directory walking and copying, template functions and a terminal spinner"
requires-python = ">=3.10"
dependencies = []
keywords = ["templates", "packs", "spinner", "filesystem", "logging", "walk"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["packkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
