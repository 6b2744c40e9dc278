[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecckit"
version = "0.1.0"
description = "Pure-Python RIPEMD-160, SHA-3, SHAKE and Keccak hashing with fixed-width big-integer and text helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ripemd160",
    "sha3",
    "keccak",
    "shake",
    "bigint",
    "mersenne twister",
]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["ecckit"]

[tool.hatch.build.targets.sdist]
include = [
    "ecckit",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
