[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, runnable examples of the classic creational, structural and behavioural design patterns."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design patterns",
    "gang of four",
    "education",
    "examples",
    "object-oriented design",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Software Development",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit-chain = "patternkit.chain:main"
patternkit-command = "patternkit.command:main"
patternkit-interpreter = "patternkit.interpreter:main"
patternkit-iterator = "patternkit.iterator:main"
patternkit-mediator = "patternkit.mediator:main"
patternkit-memento = "patternkit.memento:main"
patternkit-observer = "patternkit.observer:main"
patternkit-state = "patternkit.state:main"
patternkit-strategy = "patternkit.strategy:main"
patternkit-template-method = "patternkit.template_method:main"
patternkit-visitor = "patternkit.visitor:main"
patternkit-abstract-factory = "patternkit.abstract_factory:main"
patternkit-builder = "patternkit.builder:main"
patternkit-factory-method = "patternkit.factory_method:main"
patternkit-prototype = "patternkit.prototype:main"
patternkit-adapter = "patternkit.adapter:main"
patternkit-bridge = "patternkit.bridge:main"
patternkit-composite = "patternkit.composite:main"
patternkit-decorator = "patternkit.decorator:main"
patternkit-facade = "patternkit.facade:main"
patternkit-flyweight = "patternkit.flyweight:main"
patternkit-proxy = "patternkit.proxy:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.hatch.build.targets.sdist]
include = ["patternkit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["patternkit"]
