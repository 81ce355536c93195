[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "algokit"
version = "0.1.0"
description = "Small classic algorithms and data structures: sorting, graphs, trees, stacks and queues"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "graphs",
    "binary search tree",
    "dijkstra",
    "kruskal",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algokit-brackets = "algokit.brackets:main"
algokit-binary = "algokit.binary:main"
algokit-digits = "algokit.digits:main"
algokit-queues = "algokit.queues:main"
algokit-heapsort = "algokit.heapsort:main"
algokit-mergesort = "algokit.mergesort:main"
algokit-shell = "algokit.shell:main"
algokit-quicksort = "algokit.quicksort:main"
algokit-radix = "algokit.radix:main"
algokit-mst = "algokit.mst:main"
algokit-dijkstra = "algokit.dijkstra:main"
algokit-graph = "algokit.graph:main"
algokit-bst = "algokit.bst:main"

[tool.setuptools.packages.find]
include = ["algokit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
