[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "beauty"
version = "1.0.0"
description = "Building blocks for small HTTP services: routing, URL parsing, query attributes, responses, timers, signals and OpenAPI descriptions"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "router", "routing", "swagger", "openapi", "url", "timer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["beauty"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
