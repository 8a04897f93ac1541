[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gm65"
version = "1.0.0"
description = "Driver for the GM65 barcode scanner module over a serial stream"
requires-python = ">=3.10"
dependencies = []
keywords = ["gm65", "barcode", "qr", "scanner", "serial"]
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
    "Topic :: System :: Hardware :: Hardware Drivers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gm65"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
