[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logengine"
version = "1.3.0"
description = "Building blocks for a logging engine: string and date helpers, byte streams and fixed-size item arrays"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "streams", "file-stream", "memory-stream", "utilities"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["logengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
