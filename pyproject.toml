[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raycastmvc"
version = "0.1.0"
description = "A small grid-based raycasting renderer with a model/view/controller split"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "pygame", "dda", "first-person"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raycastmvc = "raycastmvc.view:main"

[tool.hatch.build.targets.wheel]
packages = ["raycastmvc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
