[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "disasterprep"
version = "0.1.0"
description = "Place emergency supplies on a road network so every city is covered, with layout, shift and colour helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["dominating set", "backtracking", "graph", "disaster planning", "scheduling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
disasterprep = "disasterprep.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["disasterprep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
