[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "groupie"
version = "0.1.0"
description = "A small web site that browses bands, their concert dates and locations from the Groupie Trackers API"
requires-python = ">=3.10"
keywords = ["flask", "music", "concerts", "artists", "web"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask",
    "jinja2",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
groupie = "groupie.server:main"

[tool.hatch.build.targets.wheel]
packages = ["groupie"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
