[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mxevents"
version = "0.1.0"
description = "Typed, JSON-serializable Matrix event types: presence, receipts, push rules and room media metadata."
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "chat", "events", "json", "push-rules"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mxevents"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
