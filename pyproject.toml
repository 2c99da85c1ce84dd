[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "problemdetails-api"
version = "0.1.0"
description = "Problem details (RFC 7807) error responses for web APIs, with matching OpenAPI response descriptions"
requires-python = ">=3.10"
dependencies = []
keywords = ["problem-details", "rfc7807", "openapi", "wsgi", "http", "errors"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Middleware",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
problemdetails-api-example = "problemdetails_api.example:main"

[tool.hatch.build.targets.wheel]
packages = ["problemdetails_api"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
