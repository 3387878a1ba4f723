[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tablecat"
version = "0.1.0"
description = "A desktop pet with looping animations and a side-scrolling cake-collecting runner game"
requires-python = ">=3.10"
keywords = ["desktop pet", "runner", "arcade", "pygame", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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
tablecat = "tablecat.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tablecat"]

[tool.pytest.ini_options]
addopts = "-ra"
