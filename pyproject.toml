[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustdrill"
version = "4.6.0"
description = "Load, compile, run and track small Rust exercises, with Python counterparts of their lessons"
requires-python = ">=3.11"
keywords = ["rust", "exercises", "learning", "education", "tutorial", "compiler"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rustdrill"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
