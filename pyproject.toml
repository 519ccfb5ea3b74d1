[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cavernkeep"
version = "0.1.0"
description = "Keep a cavern of dragons, ghouls and mindflayers: track levels, tameness and feeding."
requires-python = ">=3.10"
dependencies = []
keywords = ["creatures", "role-playing", "bag", "dragon", "ghoul", "mindflayer", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cavernkeep"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
