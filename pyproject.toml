[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fbscrypt"
version = "1.0.0"
description = "Derive keys with scrypt and encrypt buffers with AES-256-CTR under a passphrase-derived key"
requires-python = ">=3.10"
keywords = ["scrypt", "kdf", "pbkdf2", "hmac", "sha256", "aes", "ctr", "drbg"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fbscrypt = "fbscrypt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fbscrypt"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
