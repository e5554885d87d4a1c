[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pharmadesk"
version = "0.1.0"
description = "Interactive console for keeping pharmacies, their medications and their customers"
requires-python = ">=3.10"
dependencies = []
keywords = ["pharmacy", "inventory", "medication", "customers", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pharmadesk = "pharmadesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pharmadesk"]

[tool.pytest.ini_options]
addopts = "-ra"
