[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smallmem"
version = "0.1.0"
description = "Memory quota accounting, intrusive lists, a cyclic scratch buffer and a left-leaning red-black tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["quota", "red-black tree", "intrusive list", "scratch buffer", "data structures"]
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
packages = ["smallmem"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
