[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dailytasks"
version = "0.1.0"
description = "A small terminal to-do list that keeps one plain-text task log per day."
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "tasks", "daily", "cli", "planner"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dailytasks = "dailytasks.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dailytasks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
