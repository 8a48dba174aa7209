[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "teeio_utils"
version = "0.1.0"
description = "Helpers for PCIe IDE validation: BDF parsing, test configuration lookups and config-space access"
requires-python = ">=3.10"
dependencies = []
keywords = ["pcie", "ide", "tee-io", "bdf", "config-space", "validation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["teeio_utils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
