[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labtools"
version = "0.1.0"
description = "Small console tools: a two-operand calculator, a staff table and an employee register with CSV and binary storage"
requires-python = ">=3.10"
keywords = ["calculator", "employees", "payroll", "linked list", "csv", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labtools-calculator = "labtools.calculator:main"
labtools-payroll = "labtools.payroll:main"
labtools-employees = "labtools.app:main"

[tool.hatch.build.targets.wheel]
packages = ["labtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
