[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rboard"
version = "0.1.1"
description = "Gomoku and Zhenqi board models, kata-analyze output parsing, engine configuration and board drawing geometry"
requires-python = ">=3.10"
keywords = ["gomoku", "zhenqi", "gtp", "board-game", "katago", "analysis"]
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
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
