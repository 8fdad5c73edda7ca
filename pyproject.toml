[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "navmath"
version = "0.1.0"
description = "Small vector, matrix, quaternion and rotation helpers for navigation and attitude estimation"
requires-python = ">=3.10"
dependencies = []
keywords = ["quaternion", "matrix", "dcm", "euler", "attitude", "navigation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["navmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
