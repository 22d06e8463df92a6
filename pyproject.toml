[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pagesim"
version = "1.0.0"
description = "Simulator for FIFO, LIFO and LRU virtual-memory page replacement algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["paging", "virtual memory", "page replacement", "fifo", "lru", "lifo", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pagesim = "pagesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pagesim"]

[tool.pytest.ini_options]
addopts = "-ra"
