[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chromatic"
version = "0.1.0"
description = "Color representation, conversion, mixing and parsing across RGB, HSL, XYZ, LMS, Lab, LCh and CMYK"
requires-python = ">=3.10"
dependencies = []
keywords = ["color", "colour", "hsl", "lab", "lch", "cmyk", "color-space", "contrast"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chromatic"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
