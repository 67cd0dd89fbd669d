[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "garunner"
version = "0.1.0"
description = "A small side-scrolling runner game: jump the chicken over fire obstacles."
requires-python = ">=3.10"
keywords = ["game", "runner", "arcade", "pygame", "side-scroller"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
garunner = "garunner.app:main"

[tool.hatch.build.targets.wheel]
packages = ["garunner"]

[tool.pytest.ini_options]
addopts = "-ra"
