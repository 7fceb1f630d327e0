[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puredns"
version = "2.1.2"
description = "Very accurate massdns resolving and bruteforcing."
requires-python = ">=3.10"
dependencies = []
keywords = ["dns", "subdomain", "bruteforce", "resolver", "wildcard", "massdns"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Information Technology",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Name Service (DNS)",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["puredns"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
