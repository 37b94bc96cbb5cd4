[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "touchflow"
version = "0.1.0"
description = "Multi-touch gesture recognition for touchpads and touchscreens"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "gestures",
    "touchpad",
    "touchscreen",
    "multi-touch",
    "swipe",
    "pinch",
    "tap",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["touchflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
