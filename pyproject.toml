[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yala"
version = "1.0.0"
description = "A tiny structured logging facade: libraries log through it, applications choose where the entries go."
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "structured-logging", "logfmt", "facade", "adapter"]
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
    "Topic :: System :: Logging",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["yala"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
