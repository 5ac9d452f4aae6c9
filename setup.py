import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="t3",
    version="0.1.0",
    description="Alpha-beta minimax decision engine for the game of Tic-Tac-Total.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["t3", "t3.*"]),
    classifiers=(
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ),
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7",
            "numpy>=1.20",
        ]
    },
    python_requires=">=3.8, <4",
)
