[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tlecore"
version = "0.1.0"
description = "Two-line element sets, Julian dates, Earth coordinate frames and simple orbit models"
requires-python = ">=3.10"
dependencies = []
keywords = ["tle", "norad", "orbit", "satellite", "julian date", "eci", "astronomy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tlecore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
