[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "markovwalk"
version = "0.1.0"
description = "Generic Markov chains with weighted random walks, with a snakes-and-ladders walker and a word-based tweet generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["markov", "markov-chain", "random-walk", "text-generation", "snakes-and-ladders"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snakes-and-ladders = "markovwalk.snakes:main"
tweets-generator = "markovwalk.tweets:main"

[tool.hatch.build.targets.wheel]
packages = ["markovwalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
