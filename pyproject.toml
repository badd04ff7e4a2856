[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dskit"
version = "0.1.0"
description = "Classic data structures and algorithms: sorting, searching, heaps, hash tables, trees, graphs, tries and Huffman coding."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "search",
    "heap",
    "avl",
    "binary-search-tree",
    "hash-table",
    "graph",
    "minimum-spanning-tree",
    "huffman",
    "trie",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dskit"]

[tool.pytest.ini_options]
addopts = "-ra"
