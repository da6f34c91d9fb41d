[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raysketch"
version = "0.1.0"
description = "A small path tracer with Sobel edge detection and circle packing tools for PPM images"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["ray tracing", "path tracing", "ppm", "sobel", "edge detection", "graphics"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raysketch-render = "raysketch.scene:main"
raysketch-edges = "raysketch.edges:main"
raysketch-circles = "raysketch.circles:main"

[tool.hatch.build.targets.wheel]
packages = ["raysketch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
