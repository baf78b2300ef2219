[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bureaucracy"
version = "0.1.0"
description = "A small model of bureaucrats, grades, forms and an intern who fills them in"
requires-python = ">=3.10"
dependencies = []
keywords = ["bureaucrat", "forms", "exceptions", "education", "object-oriented"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bureaucracy = "bureaucracy.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bureaucracy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
