[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bbsysfs"
version = "0.1.0"
description = "Control BeagleBone LEDs, GPIO pins, PWM outputs and ADC inputs through Linux sysfs"
requires-python = ">=3.10"
dependencies = []
keywords = ["beaglebone", "sysfs", "gpio", "pwm", "adc", "led", "embedded"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bbsysfs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
