[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trainticket"
version = "0.1.0"
description = "In-memory train ticketing service: seat allocation, receipts, section listings and seat changes."
requires-python = ">=3.10"
dependencies = []
keywords = ["train", "ticket", "booking", "seat allocation", "reservation"]
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
    "Topic :: Office/Business",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trainticket"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
