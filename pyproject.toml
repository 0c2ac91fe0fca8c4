[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termfolio"
version = "0.1.0"
description = "A terminal-style personal portfolio: about, links, GitHub profile and pinned repositories behind a shell-like prompt."
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["portfolio", "terminal", "github", "neofetch", "prompt"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
termfolio = "termfolio.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["termfolio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
