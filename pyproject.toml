[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mole"
version = "0.1.0"
description = "Gaussian basis set molecular integrals: overlap, kinetic, nuclear attraction and electron repulsion"
requires-python = ">=3.10"
keywords = ["quantum chemistry", "gaussian basis", "molecular integrals", "electron repulsion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Chemistry",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mole = "mole.molecule:main"

[tool.hatch.build.targets.wheel]
packages = ["mole"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
