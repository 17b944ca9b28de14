[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boinglogic"
version = "0.1.0"
description = "Display-free block logic for a blockout style arcade game: the block grid, hit regions, explosions, bonus and special blocks"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "breakout", "blockout", "collision", "blocks"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["boinglogic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
