[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ra_mcp"
version = "0.1.0"
description = "Workspace handling, tool parameters and JSON result shaping for a rust-analyzer tool server."
requires-python = ">=3.10"
dependencies = []
keywords = ["rust-analyzer", "lsp", "mcp", "rust", "tooling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ra_mcp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
