[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ojo_partition"
version = "0.1.1"
description = "A union-find (disjoint-sets) structure that can list the members of each part"
requires-python = ">=3.10"
dependencies = []
keywords = ["union-find", "disjoint-sets", "partition", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ojo_partition"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
