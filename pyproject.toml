[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shadowgen"
version = "2.0.0"
description = "A \"Who's That Pokemon?\" style menu and shadow generator start screen"
requires-python = ">=3.10"
keywords = ["game", "menu", "shadow", "pygame", "fullscreen"]
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
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
shadowgen = "shadowgen.app:main"

[tool.hatch.build.targets.wheel]
packages = ["shadowgen"]

[tool.pytest.ini_options]
addopts = "-ra"
