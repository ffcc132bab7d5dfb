"""
Setup configuration for abstrie.
"""
from setuptools import setup, find_packages
from pathlib import Path

HERE = Path(__file__).parent


def read_requirements(name="requirements.txt"):
    """Runtime dependencies, one per line; comments and blanks skipped."""
    path = HERE / name
    if not path.exists():
        return []
    return [
        line.strip()
        for line in path.read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.startswith("#")
    ]


setup(
    name="abstrie",
    version="0.1.0",
    description="Generalization tries: extract structural patterns from token sequences",
    keywords=["trie", "prefix tree", "pattern extraction", "log templates"],
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.9",
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.4.0",
            "isort>=5.12.0",
        ],
    },
    zip_safe=False,
)
