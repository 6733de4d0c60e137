[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fieldpoly"
version = "0.1.0"
description = "Univariate and multilinear polynomials over the BN254 base field, with Shamir-style secret sharing"
requires-python = ">=3.10"
dependencies = []
keywords = ["polynomial", "finite field", "bn254", "lagrange", "multilinear", "shamir", "secret sharing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fieldpoly"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
