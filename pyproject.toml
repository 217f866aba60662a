[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dmdgfx"
version = "0.1.0"
description = "Monochrome framebuffer drawing and bitmap fonts for dot-matrix LED panels"
requires-python = ">=3.10"
dependencies = []
keywords = ["framebuffer", "bitmap", "font", "led-matrix", "dot-matrix", "monochrome"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dmdgfx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
