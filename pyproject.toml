[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "portfolio_ga"
version = "0.1.0"
description = "Asset indicators from price histories and genetic-algorithm portfolio weight optimisation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "portfolio",
    "optimisation",
    "genetic algorithm",
    "sharpe ratio",
    "treynor ratio",
    "beta",
    "volatility",
    "finance",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
portfolio-ga = "portfolio_ga.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["portfolio_ga"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
