from setuptools import find_packages, setup

setup(
    name="diaglinks",
    version="0.1.0",
    description="Clickable source locations in compiler and linker output",
    packages=find_packages(include=["diaglinks", "diaglinks.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output schemas
        "typer<0.26",  # CLI (0.26+ vendors click, which the code imports directly)
        "click>=8.2",  # CLI context and exceptions (typer's base)
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output
        "pygments",  # Highlighted output on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "pytest>=7.0",
            "pytest-timeout>=2.1",
            "pytest-xdist>=3.0",  # Parallel test execution
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "diaglinks=diaglinks.cli:main",
        ],
    },
)
