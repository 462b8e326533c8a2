[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spcipher"
version = "0.1.0"
description = "Substitution-permutation byte transforms and a Magma-style 64-bit block cipher for files"
requires-python = ">=3.10"
dependencies = []
keywords = ["cipher", "s-box", "substitution-permutation", "magma", "feistel", "block cipher"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spcipher = "spcipher.cli:main"
spcipher-sp = "spcipher.sp_network:main"

[tool.hatch.build.targets.wheel]
packages = ["spcipher"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
