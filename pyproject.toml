[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raykit"
version = "1.0.0"
description = "Support code for a ray tracer: Wavefront OBJ/MTL loading, mesh utilities, PNG type descriptions, scene element creators and renderer command-line options"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "wavefront", "obj", "mtl", "mesh", "png"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
raykit-args = "raykit.graphics_args:main"

[tool.hatch.build.targets.wheel]
packages = ["raykit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
