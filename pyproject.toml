[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dotman"
version = "0.1.0"
description = "An environment manager that tracks saved and ignored system packages in TOML files and keeps the installed set in line with them"
requires-python = ">=3.11"
keywords = ["dotfiles", "packages", "environment", "toml", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]
dependencies = [
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dotman = "dotman.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dotman"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
