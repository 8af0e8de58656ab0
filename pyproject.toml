[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysforge"
version = "0.1.0"
description = "Small, readable models of systems concepts: a framed binary protocol, paging and round-robin scheduling, a metrics monitor and a stack VM"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "binary-protocol",
    "framing",
    "paging",
    "scheduler",
    "round-robin",
    "monitoring",
    "virtual-machine",
    "bytecode",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sysforge-protocol-demo = "sysforge.protocol_demo:main"
sysforge-os-demo = "sysforge.os_demo:main"
sysforge-monitor-demo = "sysforge.monitor_demo:main"
sysforge-vm-demo = "sysforge.vm_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["sysforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
