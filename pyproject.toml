[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "philoshell"
version = "0.1.0"
description = "A dining-philosophers simulation and a small bash-like shell with builtins, pipelines, redirections and heredocs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "shell",
    "minishell",
    "dining philosophers",
    "threads",
    "concurrency",
    "lexer",
    "parser",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: System :: Shells",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
philo = "philoshell.philo.simulation:main"
minishell = "philoshell.shell.repl:main"

[tool.hatch.build.targets.wheel]
packages = ["philoshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
