[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chapterkit"
version = "0.1.0"
description = "Small worked programs and libraries: expression evaluation, HTML tools, bit sets, plane geometry, disk usage and tiny network servers."
requires-python = ">=3.10"
keywords = [
    "expression-evaluator",
    "html",
    "links",
    "bitset",
    "geometry",
    "disk-usage",
    "tcp-server",
    "examples",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "requests",
    "html5lib",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
    "pytest-asyncio",
]

[project.scripts]
chapterkit-surface = "chapterkit.surface:main"
chapterkit-outline = "chapterkit.outline:main"
chapterkit-title = "chapterkit.title:main"
chapterkit-fetch = "chapterkit.fetch:main"
chapterkit-toposort = "chapterkit.toposort:main"
chapterkit-urlvalues = "chapterkit.urlvalues:main"
chapterkit-xmlselect = "chapterkit.xmlselect:main"
chapterkit-shop = "chapterkit.shop:main"
chapterkit-chat = "chapterkit.chat:main"
chapterkit-reverb = "chapterkit.reverb:main"
chapterkit-netcat = "chapterkit.netcat:main"
chapterkit-du = "chapterkit.du:main"
chapterkit-pipeline = "chapterkit.pipeline:main"
chapterkit-countdown = "chapterkit.countdown:main"
chapterkit-thumbnail = "chapterkit.thumbnail:main"

[tool.hatch.build.targets.wheel]
packages = ["chapterkit"]

[tool.hatch.build.targets.sdist]
include = ["chapterkit", "tests", "pyproject.toml"]

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
