[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algobox"
version = "0.1.0"
description = "Classic algorithms and data structures: sorting, searching, graphs, trees, backtracking and small games"
requires-python = ">=3.10"
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "searching",
    "graphs",
    "trees",
    "backtracking",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
algobox-maze = "algobox.maze:main"
algobox-tictactoe = "algobox.tictactoe:main"
algobox-aes-gcm = "algobox.aes_gcm:main"

[tool.hatch.build.targets.wheel]
packages = ["algobox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
