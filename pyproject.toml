[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelcraft"
version = "0.1.0"
description = "Voxel chunk data, fly camera, physics components and render-setup rules for a block-based game engine"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["voxel", "chunk", "camera", "game-engine", "aabb", "vertex", "swapchain"]
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
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["voxelcraft"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
