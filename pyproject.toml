[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "concdemos"
version = "1.0.0"
description = "Small teaching demos: XOR cipher, big-integer arithmetic and limbs, summation timing, root mean square, and work-mapping simulation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "concurrency",
    "mapping",
    "load-balancing",
    "bignum",
    "limbs",
    "xor-cipher",
    "root-mean-square",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
concdemos-xor = "concdemos.xor_cipher:main"
concdemos-bignum = "concdemos.bignum:main"
concdemos-limbs = "concdemos.limbs:limbs_main"
concdemos-small-integers = "concdemos.limbs:small_integers_main"
concdemos-perf = "concdemos.perf:main"
concdemos-rms-inner-product = "concdemos.rms:inner_product_main"
concdemos-rms-transform = "concdemos.rms:transform_main"
concdemos-mapping = "concdemos.mapping:main"

[tool.hatch.build.targets.wheel]
packages = ["concdemos"]

[tool.pytest.ini_options]
addopts = "-ra"
