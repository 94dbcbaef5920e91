[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "medrec"
version = "0.1.0"
description = "Console register of student clinic visits with DES file encryption"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["students", "clinic", "visits", "register", "des", "encryption"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
medrec = "medrec.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["medrec"]

[tool.pytest.ini_options]
addopts = "-ra"
