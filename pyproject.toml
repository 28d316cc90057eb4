[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, runnable examples of classic object-oriented design patterns: adapter, builder, composite, prototype and singleton."
requires-python = ">=3.10"
dependencies = []
keywords = ["design-patterns", "adapter", "builder", "composite", "prototype", "singleton"]
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit-media = "patternkit.media:main"
patternkit-org = "patternkit.organization:main"
patternkit-prototypes = "patternkit.registry:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
