from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="spgraph",
    version="0.1.0",
    description="Directed weighted graphs with memoized shortest-path queries.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=["networkx>=3.0"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["spgraph = spgraph.cli:main"]},
)
