from setuptools import setup, find_packages

setup(
    name="magic-square",
    version="1.0.0",
    description="Magic Square Puzzle Generator & Verifier",
    author="robomotic",
    packages=find_packages(include=["magic_square", "magic_square.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "matplotlib>=3.5.0",
        "seaborn>=0.11.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "magic-square=magic_square.cli:main",
        ],
    },
)
