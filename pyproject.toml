[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filejanitor"
version = "0.1.0"
description = "Tidy a directory by moving its files into folders named after their extensions."
requires-python = ">=3.10"
dependencies = []
keywords = ["files", "organize", "cleanup", "directory", "extensions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
filejanitor = "filejanitor.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["filejanitor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
