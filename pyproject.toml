[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordcalc"
version = "0.1.0"
description = "Linked-list containers, RPN and infix calculators, and an AVL-tree word counter"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "stack", "queue", "rpn", "calculator", "infix", "avl tree", "word count"]
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
test = ["pytest", "hypothesis"]

[project.scripts]
wordcalc-wordcount = "wordcalc.wordcount:main"

[tool.hatch.build.targets.wheel]
packages = ["wordcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
