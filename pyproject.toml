[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "infoorbs"
version = "0.1.0"
description = "Widgets, data models and drawing helpers for a row of five round displays: clock, weather, stock and portfolio data, and web-driven screens"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = [
    "dashboard",
    "clock",
    "weather",
    "stocks",
    "portfolio",
    "display",
    "widgets",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["infoorbs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
