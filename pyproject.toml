[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pinjam"
version = "0.1.0"
description = "Interactive console tool for managing customer loans, payments and installment simulations"
requires-python = ">=3.10"
dependencies = []
keywords = ["loan", "installment", "interest", "console", "finance"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pinjam = "pinjam.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pinjam"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
