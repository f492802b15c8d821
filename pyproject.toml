[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unitconvert"
version = "0.1.0"
description = "Convert between units of distance, mass and temperature"
requires-python = ">=3.10"
dependencies = []
keywords = ["units", "conversion", "distance", "mass", "temperature", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
unitconvert = "unitconvert.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["unitconvert"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
