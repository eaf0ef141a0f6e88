[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evmlite"
version = "0.1.0"
description = "Building blocks of an Ethereum virtual machine: exit reasons, gas, stack, memory, contracts, an in-memory state database and Merkle state roots"
requires-python = ">=3.10"
keywords = ["ethereum", "evm", "merkle", "patricia-trie", "rlp", "keccak"]
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
    "Topic :: Software Development :: Interpreters",
]
dependencies = [
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
evmlite-merkle = "evmlite.merkle:main"

[tool.hatch.build.targets.wheel]
packages = ["evmlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
