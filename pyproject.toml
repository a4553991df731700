[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordtally"
version = "0.1.0"
description = "Count the distinct words in a text file and keep a running tally in a log file"
requires-python = ">=3.10"
dependencies = []
keywords = ["words", "word count", "frequency", "concordance", "text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordtally = "wordtally.lexer:main"

[tool.hatch.build.targets.wheel]
packages = ["wordtally"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
