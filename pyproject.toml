[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "particlekit"
version = "0.1.0"
description = "Particle buffers stored as structures of arrays, with bounds, actors and a text renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["particles", "structure-of-arrays", "physics", "simulation", "bounds"]
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
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
particlekit = "particlekit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["particlekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
