[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tomatoclock"
version = "0.1.0"
description = "A Pomodoro work/break clock with pluggable observers and a terminal front end."
requires-python = ">=3.10"
dependencies = []
keywords = ["pomodoro", "timer", "productivity", "time-management", "observer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tomatoclock = "tomatoclock.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tomatoclock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
