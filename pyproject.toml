[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "baseconvert"
version = "1.0.0"
description = "Command-line utility that converts decimal integers to bases 2 through 36"
requires-python = ">=3.10"
dependencies = []
keywords = ["base", "conversion", "binary", "hexadecimal", "radix", "cli"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
convert = "baseconvert.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["baseconvert"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
