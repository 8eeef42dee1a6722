from setuptools import setup, find_packages

setup(
    name="sudoku-core",
    version="1.0.0",
    description="Sudoku Puzzle Generator, Conflict Checker & Backtracking Solver",
    packages=find_packages(include=["sudoku_core", "sudoku_core.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.21.0",
        "matplotlib>=3.6.0",
        "seaborn>=0.13.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "sudoku-core=sudoku_core.cli:main",
        ],
    },
)
