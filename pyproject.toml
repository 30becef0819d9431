[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpusim"
version = "0.1.0"
description = "Teaching simulator for CPU scheduling algorithms and resource synchronization"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "scheduling",
    "operating-systems",
    "fifo",
    "sjf",
    "srt",
    "round-robin",
    "priority",
    "gantt",
    "synchronization",
    "simulation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpusim = "cpusim.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["cpusim"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
