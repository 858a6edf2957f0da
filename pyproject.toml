[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "transitmap"
version = "0.1.0"
description = "Transport catalogue: bus route statistics, fastest-journey routing and SVG route maps driven by JSON requests"
requires-python = ">=3.10"
dependencies = []
keywords = ["transport", "bus", "routes", "svg", "map", "json", "routing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
transitmap = "transitmap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["transitmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
