[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cornrow"
version = "0.8.0"
description = "Equalizer filter types, biquad math, BLE payload encoding, response plots and configuration for a software DSP audio service and its remote control"
requires-python = ">=3.11"
dependencies = []
keywords = ["audio", "dsp", "equalizer", "biquad", "bluetooth", "ble", "bode plot", "crossover"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cornrow"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
strict = true
