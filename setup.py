from setuptools import find_packages, setup

setup(
    name="mdlinks",
    version="0.1.0",
    description="GitHub-aware resolution of markdown links to project files",
    author="William Wieselquist",
    packages=find_packages(include=["mdlinks", "mdlinks.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer<0.26",  # CLI (0.26+ no longer builds on click, which the CLI uses directly)
        "click",  # CLI (imported directly)
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "mdlinks=mdlinks.cli:main",
        ],
    },
)
