[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecspong"
version = "0.1.0"
description = "A two-player Pong game built on a small entity-component-system core"
requires-python = ">=3.10"
keywords = ["pong", "game", "arcade", "ecs", "entity-component-system"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ecspong = "ecspong.game:main"

[tool.hatch.build.targets.wheel]
packages = ["ecspong"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
