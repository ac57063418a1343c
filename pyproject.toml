[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fotones"
version = "0.1.0"
description = "Vectors, matrices, camera, materials, photon maps and PPM files for a photon-mapping renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["photon mapping", "rendering", "kd-tree", "ppm", "ray tracing"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fotones"]

[tool.pytest.ini_options]
addopts = "-ra"
