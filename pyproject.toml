[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "m3ua"
version = "0.1.0"
description = "Encoding and decoding of M3UA (RFC 4666) messages, parameters and SS7 point codes"
requires-python = ">=3.10"
dependencies = []
keywords = ["m3ua", "sigtran", "ss7", "rfc4666", "telephony", "point-code"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Telephony",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["m3ua"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
