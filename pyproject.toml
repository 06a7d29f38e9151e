[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strawcore"
version = "0.1.0"
description = "Core utility types: optionals, variants, results, type sets, UTF helpers, dates, lazy values, checked references, background tasks and images."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["optional", "result", "variant", "utf-8", "utilities", "lazy", "image", "date"]
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["strawcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
