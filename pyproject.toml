[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "muffet"
version = "2.4.6"
description = "Building blocks for a website link checker"
requires-python = ">=3.10"
keywords = ["link-checker", "website", "crawler", "http", "broken-links"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Site Management :: Link Checking",
]
dependencies = [
    "httpx",
    "brotli",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["muffet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
