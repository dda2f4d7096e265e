[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strokepaint"
version = "0.1.0"
description = "Stroke geometry, draw-command building, buffer pooling and frame preparation for a small paint program"
requires-python = ">=3.10"
dependencies = []
keywords = ["paint", "graphics", "polyline", "triangles", "vertex buffer", "renderer"]
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
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["strokepaint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
