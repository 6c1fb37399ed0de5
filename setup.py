# setup.py
from setuptools import setup, find_packages

setup(
    name="seval",
    version="0.1.0",
    description="Sandboxed S-expression evaluator with a language server",
    packages=find_packages(include=["seval", "seval.*", "seval_lsp", "seval_lsp.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "lsp": ["pygls>=1.1,<2", "lsprotocol"],
        "test": ["pytest", "hypothesis", "pygls>=1.1,<2", "lsprotocol"],
    },
    entry_points={
        "console_scripts": [
            "seval-ls=seval_lsp.server:main",
        ],
    },
    zip_safe=False,
)
