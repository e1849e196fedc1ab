[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vos"
version = "1.0.0"
description = "A small virtual operating system: kernel, heartbeat clock, device registry, logger and task registry"
requires-python = ">=3.10"
dependencies = []
keywords = ["virtual os", "kernel", "scheduler", "simulation", "tasks"]
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
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vos = "vos.main:main"

[tool.hatch.build.targets.wheel]
packages = ["vos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
