from setuptools import find_packages, setup

setup(
    name="scell-mcp",
    version="1.1.0",
    description="MCP client configuration generator for the Scell.io API",
    packages=find_packages(include=["scell_mcp", "scell_mcp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Input and output models
        "typer>=0.16,<0.26",  # Command-line interface
        "click>=8.2",  # Usage errors raised through Typer
        "rich",  # Terminal formatting
        "jinja2",  # Template rendering for the annotated generic output
        "PyYAML",  # YAML output for --display yaml
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "scell-mcp=scell_mcp.cli:main",
        ],
    },
)
