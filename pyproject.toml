[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cdrills"
version = "0.1.0"
description = "Classic programming drills: number theory, searching, sorting, strings, patterns, paging and small data structures"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "exercises", "sorting", "searching", "page-replacement", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cdrills-paging = "cdrills.paging:main"
cdrills-stack = "cdrills.stack:main"

[tool.hatch.build.targets.wheel]
packages = ["cdrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
