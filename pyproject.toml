[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nodescaler"
version = "0.1.0"
description = "Pod and node data types, affinity relaxation and utilities for a node autoscaler"
requires-python = ">=3.10"
dependencies = [
    "cachetools",
]
keywords = [
    "autoscaling",
    "cluster",
    "nodes",
    "pods",
    "scheduling",
    "affinity",
    "resources",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Clustering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nodescaler"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
