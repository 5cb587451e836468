[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sca25519"
version = "0.1.0"
description = "Curve25519 scalar multiplication with side-channel countermeasures and Ed25519 point output"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "curve25519",
    "ed25519",
    "elliptic-curve",
    "montgomery-ladder",
    "side-channel",
    "scalar-multiplication",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sca25519-bench = "sca25519.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["sca25519"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
