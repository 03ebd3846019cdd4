[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modelkit"
version = "0.1.0"
description = "3D math, bounding volumes, cameras, frustum culling, skinning weights and material export helpers"
requires-python = ">=3.10"
keywords = [
    "3d",
    "graphics",
    "camera",
    "frustum",
    "skinning",
    "bounding-volume",
    "materials",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["modelkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
