[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocket-tools"
version = "1.0.0"
description = "A small menu-driven toolbox: calculator, Morse encoder, and number-system, temperature and data-unit converters."
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "morse", "converter", "binary", "octal", "temperature", "data units"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
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
pocket-tools = "pocket_tools.menus:main"

[tool.hatch.build.targets.wheel]
packages = ["pocket_tools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
