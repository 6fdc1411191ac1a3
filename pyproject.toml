[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "colordla"
version = "0.1.0"
description = "Two-colour diffusion-limited aggregation with detonations, purple conversion and green infill"
requires-python = ">=3.10"
dependencies = []
keywords = ["dla", "diffusion-limited aggregation", "random walk", "simulation", "ppm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
colordla = "colordla.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["colordla"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
