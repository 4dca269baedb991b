[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raidseeker"
version = "0.1.0"
description = "Max raid den seed generation, filtering and sys-botbase automation for Sword and Shield"
requires-python = ">=3.10"
dependencies = []
keywords = ["pokemon", "raid", "rng", "xoroshiro", "sword", "shield", "sys-botbase"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["raidseeker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
