[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minilisp"
version = "0.1.0"
description = "Minimal Lisp expressions: scanning, visiting, printing, encoding, hashing and an in-memory value store"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "s-expression", "parser", "scanner", "tokenizer", "printer", "grammar"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
minilisp-show = "minilisp.tools.show:main"
minilisp-repl = "minilisp.tools.repl:main"
minilisp-tokens = "minilisp.tools.tokens:main"
minilisp-nodes = "minilisp.tools.nodes:main"
minilisp-generate = "minilisp.tools.generate:main"
minilisp-deriv = "minilisp.tools.deriv:main"
minilisp-ebnfgen = "minilisp.tools.ebnfgen:main"
minilisp-uletters = "minilisp.tools.uletters:main"
minilisp-utf8string = "minilisp.tools.utf8string:main"

[tool.hatch.build.targets.wheel]
packages = ["minilisp"]

[tool.hatch.build.targets.sdist]
include = ["minilisp", "tests"]

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
