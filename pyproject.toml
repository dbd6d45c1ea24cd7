[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ascendkit"
version = "0.1.0"
description = "Path safety checks, file helpers and device data types for Ascend NPU monitoring tools"
requires-python = ">=3.10"
keywords = ["npu", "ascend", "monitoring", "file-check", "path-validation", "device"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ascendkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
