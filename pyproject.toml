[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "redditwiki"
version = "0.1.0"
description = "Client for the wiki endpoints of the Reddit API"
requires-python = ">=3.10"
dependencies = []
keywords = ["reddit", "wiki", "api", "client"]
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
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["redditwiki"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
