[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slayerlog"
version = "0.1.0"
description = "Building blocks for a multi-source log viewer: source specs, timestamp-ordered merging, search patterns, INI settings and a debug log."
requires-python = ">=3.10"
dependencies = []
keywords = ["logs", "log-viewer", "merge", "search", "settings", "ini"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["slayerlog"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
