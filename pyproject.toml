[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ntfsread"
version = "0.4.0"
description = "A low-level reader for NTFS on-disk structures: records, B-tree indexes and attribute values"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "nt", "ntfs", "windows", "forensics", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ntfsread"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
