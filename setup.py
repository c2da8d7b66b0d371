from setuptools import setup

install_requires = ["PyYAML==6.0.2", "rich>=13.7"]

tests_require = [
    "pytest==8.1.1",
    "pytest-cov==4.1.0",
    "flake8==7.0.0",
    "black==24.2.0",
    "isort==5.13.2",
    "coverage==7.4.3",
]

dev_requires = sorted(tests_require + ["pre-commit==3.6.2"])


setup(
    name="flagparse",
    version="1.0.0",
    description="Fill option dataclasses from command-line flags.",
    packages=["flagparse"],
    python_requires=">=3.10",
    install_requires=install_requires,
    extras_require={
        "tests": tests_require,
        "dev": dev_requires,
    },
)
