[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primepoly"
version = "0.1.0"
description = "Arithmetic over a small prime field: scalars, vectors and polynomials with scalar or vector coefficients."
requires-python = ">=3.10"
dependencies = []
keywords = ["finite field", "prime field", "polynomial", "vector", "inner product"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
primepoly = "primepoly.app:main"

[tool.hatch.build.targets.wheel]
packages = ["primepoly"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
