[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wirerast"
version = "0.1.0"
description = "A small software rasterizer that projects triangles and draws them as wireframes"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = ["rasterizer", "wireframe", "graphics", "projection", "bresenham"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wirerast = "wirerast.app:main"
wirerast-basics = "wirerast.basics:main"

[tool.hatch.build.targets.wheel]
packages = ["wirerast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
