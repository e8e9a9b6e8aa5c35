[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkcheck"
version = "0.1.0"
description = "Data-link error detection and correction over TCP: parity, CRC, checksum and Hamming codes, plus a simple chat channel"
requires-python = ">=3.10"
dependencies = []
keywords = ["crc", "checksum", "hamming", "parity", "error-detection", "tcp", "networking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linkcheck-chat = "linkcheck.chat:main"
linkcheck-crc = "linkcheck.crc:main"
linkcheck-checksum = "linkcheck.checksum:main"
linkcheck-hamming = "linkcheck.hamming:main"
linkcheck-parity = "linkcheck.parity:main"

[tool.hatch.build.targets.wheel]
packages = ["linkcheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
