[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jfifwriter"
version = "1.0.0"
description = "A compact baseline JPEG/JFIF encoder for grayscale and RGB images"
requires-python = ">=3.10"
dependencies = []
keywords = ["jpeg", "jfif", "image", "encoder", "dct", "huffman"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
    "pillow",
]

[tool.hatch.build.targets.wheel]
packages = ["jfifwriter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
