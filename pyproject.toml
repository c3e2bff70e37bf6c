[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinynn"
version = "0.1.0"
description = "A tiny dense neural network toolkit: generate, import and run small feed-forward models stored as CSV files"
requires-python = ">=3.10"
dependencies = []
keywords = ["neural network", "inference", "mlp", "softmax", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinynn = "tinynn.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinynn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
