[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mayokit"
version = "1.0.0"
description = "Pure-Python building blocks for the MAYO signature scheme: Keccak/SHAKE, SHA-3, AES, CTR-DRBG and nibble/m-vector encodings"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "mayo",
    "post-quantum",
    "multivariate",
    "keccak",
    "shake256",
    "sha3",
    "aes",
    "ctr-drbg",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mayokit"]

[tool.hatch.build.targets.sdist]
include = ["mayokit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
