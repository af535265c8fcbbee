[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "guardedchat"
version = "0.1.0"
description = "Moderated group chat core: profanity filtering, penalties, bans and bcrypt-hashed user records"
requires-python = ">=3.10"
dependencies = [
    "bcrypt",
]
keywords = ["chat", "moderation", "profanity", "ban", "bcrypt"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
guardedchat-adduser = "guardedchat.adduser:main"

[tool.hatch.build.targets.wheel]
packages = ["guardedchat"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
