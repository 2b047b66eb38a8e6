"""
Setup script for the ccmetrics package.
"""

from setuptools import setup, find_packages
import os

# Read the README
readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
if os.path.exists(readme_path):
    with open(readme_path, 'r', encoding='utf-8') as f:
        long_description = f.read()
else:
    long_description = "Per-function cyclomatic complexity and instruction metrics for C and C++."

setup(
    name="ccmetrics",
    version="1.0.0",
    author="ccmetrics developers",
    description="Per-function cyclomatic complexity and LLVM IR instruction metrics for C and C++",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pyyaml>=6.0",
    ],
    extras_require={
        "treesitter": ["tree-sitter>=0.20,<0.22", "tree-sitter-languages>=1.8"],
        "full": ["tree-sitter>=0.20,<0.22", "tree-sitter-languages>=1.8"],
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
            "black>=23.0",
            "mypy>=1.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ccmetrics=ccmetrics.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: C",
        "Programming Language :: C++",
        "Topic :: Software Development :: Quality Assurance",
    ],
    keywords="cyclomatic-complexity, mccabe, static-analysis, metrics, llvm, tree-sitter",
)
