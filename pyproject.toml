[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shrubvm"
version = "0.1.0"
description = "A small stack-based bytecode virtual machine with scoped variables"
requires-python = ">=3.10"
dependencies = []
keywords = ["virtual machine", "bytecode", "interpreter", "stack machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shrubvm = "shrubvm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shrubvm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
