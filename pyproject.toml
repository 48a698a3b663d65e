[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sigprims"
version = "0.1.0"
description = "Building blocks for lattice and deterministic-nonce digital signatures: ML-DSA algebra, encodings, sampling, hints and RFC 6979 nonce generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["cryptography", "signature", "ml-dsa", "dilithium", "rfc6979", "lattice", "ntt"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sigprims"]

[tool.pytest.ini_options]
addopts = "-ra"
