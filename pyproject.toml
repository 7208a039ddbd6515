[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brailleread"
version = "0.1.0"
description = "Read embossed Braille pages from scanned images into six-dot cell patterns"
requires-python = ">=3.10"
keywords = ["braille", "ocr", "image recognition", "accessibility", "scanning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Adaptive Technologies",
    "Topic :: Scientific/Engineering :: Image Recognition",
]
dependencies = [
    "numpy",
    "scipy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
brailleread = "brailleread.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["brailleread"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
