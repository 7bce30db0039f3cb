[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "questbooth"
version = "1.0.0"
description = "A touchscreen photo booth: pick a weapon, a land and a companion, enter your name and strike a pose."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["photo booth", "camera", "kiosk", "touchscreen", "countdown", "tkinter"]
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
    "Topic :: Multimedia :: Graphics :: Capture :: Digital Camera",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
questbooth = "questbooth.app:main"

[tool.hatch.build.targets.wheel]
packages = ["questbooth"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
