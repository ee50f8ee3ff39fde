[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "molliecli"
version = "0.1.0"
description = "Display models, column layouts, flag definitions and prompt catalogues for a Mollie payments API command-line client."
requires-python = ">=3.10"
dependencies = []
keywords = ["mollie", "payments", "cli", "refunds", "invoices", "chargebacks"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["molliecli"]

[tool.hatch.build.targets.sdist]
include = ["molliecli", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
