[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinynet"
version = "0.1.0"
description = "A small dense neural network with backpropagation and SGD training, in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["neural network", "backpropagation", "sgd", "mnist", "machine learning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinynet-train = "tinynet.train:main"

[tool.hatch.build.targets.wheel]
packages = ["tinynet"]

[tool.pytest.ini_options]
addopts = "-ra"
