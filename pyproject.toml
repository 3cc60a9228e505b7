[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent23"
version = "1.0.0"
description = "Solvers for a season of daily programming puzzles: calibration values, gear ratios, camel cards, pulse networks, sand slabs and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "algorithms", "graphs", "simulation"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent23-trebuchet = "advent23.trebuchet:main"
advent23-cubes = "advent23.cubes:main"
advent23-gear-ratios = "advent23.gear_ratios:main"
advent23-scratchcards = "advent23.scratchcards:main"
advent23-seed-maps = "advent23.seed_maps:main"
advent23-boat-race = "advent23.boat_race:main"
advent23-camel-cards = "advent23.camel_cards:main"
advent23-wasteland = "advent23.wasteland:main"
advent23-mirage = "advent23.mirage:main"
advent23-aplenty = "advent23.aplenty:main"
advent23-pulses = "advent23.pulses:main"
advent23-step-counter = "advent23.step_counter:main"
advent23-sand-slabs = "advent23.sand_slabs:main"
advent23-hail-paths = "advent23.hail_paths:main"
advent23-slab-chain = "advent23.slab_chain:main"
advent23-snowverload = "advent23.snowverload:main"
advent23-long-walk = "advent23.long_walk:main"
advent23-rock-throw = "advent23.rock_throw:main"

[tool.hatch.build.targets.wheel]
packages = ["advent23"]

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
