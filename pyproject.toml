[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "btrfs-diskformat"
version = "0.5.1"
description = "Decode and encode the on-disk structures of the btrfs filesystem."
requires-python = ">=3.10"
dependencies = []
keywords = ["btrfs", "filesystem", "diskformat", "superblock", "binary"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["btrfs_diskformat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
