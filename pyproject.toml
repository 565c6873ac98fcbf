[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reviewsvc"
version = "0.1.0"
description = "Building blocks of a product review service: snowflake IDs, review records and validated request messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["reviews", "e-commerce", "snowflake", "validation", "messages"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["reviewsvc"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"
