[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zedkit"
version = "0.1.0"
description = "Small text, character, colour, date-validation, formatting and line-reading utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "printf", "colors", "hsv", "dates", "linked-list", "line-reader", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zedkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
