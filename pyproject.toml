[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tabdock"
version = "0.1.0"
description = "Docking layout model: surfaces, binary split trees and tabs that can be moved, split and undocked into windows."
requires-python = ">=3.10"
dependencies = []
keywords = ["docking", "tabs", "layout", "split", "window", "ui"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tabdock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
