from setuptools import find_packages, setup

setup(
    name="atlas-magic-links",
    version="0.1.0",
    description="Atlas - magic link resolution and checking for documentation content",
    packages=find_packages(include=["atlas", "atlas.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer>=0.12",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "atlas=atlas.cli:main",
        ],
    },
)
