[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imgloader"
version = "0.1.0"
description = "Load, save and display grayscale and RGB images as plain pixel grids"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["image", "grayscale", "rgb", "ascii-art", "pixels"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
imgloader-demo = "imgloader.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["imgloader"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
