[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ocmtools"
version = "0.1.0"
description = "Helpers for multi-cluster administration tools: cluster options, feature gates, version bundles, preflight checks, resource quantities and status printing."
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "multicluster", "cluster-management", "feature-gates", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Clustering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ocmtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
