[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studentpath"
version = "0.1.0"
description = "Predict student dropout, enrolment and graduation with a depth-limited decision tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["decision tree", "classification", "gini", "students", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studentpath = "studentpath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["studentpath"]

[tool.pytest.ini_options]
addopts = "-ra"
