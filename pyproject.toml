[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphlayout"
version = "0.1.0"
description = "Force-directed graph layout (fCoSE-style), layout benchmarks and sample graph generators"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "layout", "force-directed", "fcose", "visualization", "benchmark", "generator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphlayout = "graphlayout.benchmark:main"
generate_json_graph = "graphlayout.generators.json_graph:main"
generate_csv_graph = "graphlayout.generators.csv_graph:main"
generate_dot_graph = "graphlayout.generators.dot_graph:main"
generate_layout_graph = "graphlayout.generators.layout_graph:main"
generate_large_graph = "graphlayout.generators.large_graph:main"
generate_domain_graph = "graphlayout.generators.domain_graph:main"
generate_medicine_graph = "graphlayout.generators.medicine_graph:main"

[tool.hatch.build.targets.wheel]
packages = ["graphlayout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
