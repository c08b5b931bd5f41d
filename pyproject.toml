[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "statusbar"
version = "0.1.0"
description = "Status line segments, update streams, an HTTP control API and an AI text ticker for window-manager status bars"
requires-python = ">=3.10"
keywords = ["statusbar", "window-manager", "ticker", "asyncio", "ollama"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Desktop Environment :: Window Managers :: Applets",
]
dependencies = [
    "aiohttp",
    "psutil",
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
ask = "statusbar.ask:main"
aiserver = "statusbar.aiservice:main"

[tool.hatch.build.targets.wheel]
packages = ["statusbar"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
