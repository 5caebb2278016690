[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbcatch"
version = "0.1.0"
description = "A small arcade game: catch the falling yin-yang orbs before time runs out"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "pygame", "collision"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
orbcatch = "orbcatch.game:main"

[tool.hatch.build.targets.wheel]
packages = ["orbcatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
