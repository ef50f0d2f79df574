[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortsteps"
version = "0.1.0"
description = "Classic sorting algorithms that report every step they take"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "algorithms", "education", "linked list", "insertion sort", "cocktail sort", "cards"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sortsteps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
