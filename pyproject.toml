[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "media_finder"
version = "0.1.0"
description = "Periodically scan a directory tree for audio, video and image files and publish the list as JSON or over HTTP"
requires-python = ">=3.10"
dependencies = []
keywords = ["media", "audio", "video", "images", "scanner", "report"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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
media-finder = "media_finder.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["media_finder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
