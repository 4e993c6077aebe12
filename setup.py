from setuptools import find_packages, setup

setup(
    name="picup",
    version="0.3.0",
    description="Upload local images referenced by Markdown documents and rewrite the links",
    author="picup contributors",
    packages=find_packages(include=["picup", "picup.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer<0.26",  # CLI (0.26+ vendors its own click, which the code does not catch)
        "click",  # Used directly by the CLI
        "rich",  # Terminal formatting
        "requests",  # PicGo server uploads
        "pyyaml",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
    },
    entry_points={
        "console_scripts": [
            "picup=picup.cli:main",
        ],
    },
)
