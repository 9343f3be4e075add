[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "babyengine"
version = "0.1.0"
description = "A small 3D engine core: transforms, cameras, lights, curves, scene graphs, particles and input handling"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "3d",
    "graphics",
    "scene-graph",
    "camera",
    "bezier",
    "b-spline",
    "particles",
    "animation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["babyengine"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
