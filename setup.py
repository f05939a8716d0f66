from pathlib import Path
from setuptools import setup, find_packages

here = Path(__file__).parent
version_ns = {}
with open(here / "jupyverse_client" / "_version.py") as f:
    exec(f.read(), {}, version_ns)

setup(
    name="jupyverse_client",
    version=version_ns["__version__"],
    url="https://github.com/jupyter-server/jupyverse.git",
    author="Jupyter Development Team",
    author_email="jupyter@googlegroups.com",
    description="A typed client for the Jupyter server REST API",
    packages=find_packages(include=["jupyverse_client", "jupyverse_client.*"]),
    python_requires=">=3.10",
    install_requires=[
        "anyio",
        "httpx",
        "pydantic>=2",
        "rich-click",
        "structlog",
    ],
    extras_require={
        "test": [
            "pytest",
            "fastapi",
            "black",
            "mypy",
            "flake8",
        ],
    },
    entry_points={
        "console_scripts": ["jupyverse-client = jupyverse_client.cli:main"],
    },
    classifiers=(
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ),
)
