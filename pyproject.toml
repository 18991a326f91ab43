[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quizapp"
version = "0.1.0"
description = "A console multiple-choice quiz runner with student registration and scoring"
requires-python = ">=3.10"
dependencies = []
keywords = ["quiz", "exam", "multiple-choice", "console", "education"]
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
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quizapp = "quizapp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quizapp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
