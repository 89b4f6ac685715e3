[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raytrace"
version = "0.2.0"
description = "A small interactive ray tracer that draws spheres and squares against a sky gradient"
requires-python = ">=3.10"
keywords = ["raytracing", "rendering", "graphics", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raytrace = "raytrace.app:main"

[tool.hatch.build.targets.wheel]
packages = ["raytrace"]

[tool.pytest.ini_options]
addopts = "-ra"
