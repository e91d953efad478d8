[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matchbook"
version = "0.1.0"
description = "A price-time priority order book with a matching engine and a small HTTP health server"
requires-python = ">=3.10"
dependencies = []
keywords = ["order book", "matching engine", "trading", "exchange", "limit order"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
matchbook-server = "matchbook.httpserver:main"

[tool.hatch.build.targets.wheel]
packages = ["matchbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
