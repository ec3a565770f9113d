from setuptools import setup, find_packages

setup(
    name="candoku",
    version="1.0.0",
    description="Sudoku solver using candidate tracking and MRV backtracking",
    author="robomotic",
    packages=find_packages(include=["candoku", "candoku.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "candoku=candoku.cli:main",
        ],
    },
)
