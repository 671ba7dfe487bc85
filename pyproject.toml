[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelui"
version = "0.1.0"
description = "A small retained-mode widget toolkit for pygame: rounded buttons, text boxes and text inputs with z-ordered rendering."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["pygame", "ui", "widgets", "button", "text input", "gui"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelui-demo = "pixelui.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
