[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixeldemos"
version = "0.1.0"
description = "Small 2D game demos with pygame: an Amida-kuji ladder lottery, bouncing balls, Conway's Game of Life and more"
requires-python = ">=3.10"
keywords = ["games", "demos", "amidakuji", "game-of-life", "pygame", "2d", "particles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixeldemos-amidakuji = "pixeldemos.amidakuji:main"
pixeldemos-bouncing = "pixeldemos.bouncing:main"
pixeldemos = "pixeldemos.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["pixeldemos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
