[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "falco"
version = "0.1.0"
description = "Fastly VCL syntax tree with comment-preserving rendering, include resolution, Terraform plan input and external transformers"
requires-python = ">=3.10"
dependencies = []
keywords = ["vcl", "fastly", "ast", "terraform", "transformer"]
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
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["falco"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
