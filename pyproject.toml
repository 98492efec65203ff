[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kiamkit"
version = "1.41.390"
description = "Small numeric, container, string, stream and synchronisation utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "bounding-box", "arrays", "streams", "synchronisation", "memory-accounting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kiamkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
