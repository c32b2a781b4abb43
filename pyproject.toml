[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asciibanner"
version = "0.1.0"
description = "Render text as large ASCII-art banners from font files, with optional ANSI colour highlighting"
requires-python = ">=3.10"
dependencies = []
keywords = ["ascii-art", "banner", "font", "terminal", "ansi", "colour"]
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
    "Topic :: Text Processing :: Fonts",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
asciibanner = "asciibanner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["asciibanner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
