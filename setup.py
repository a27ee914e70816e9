from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="navigable-collections",
    version="1.0.0",
    description="Sorted sets ordered by a comparator, with navigation queries, bidirectional iteration, and range views.",
    packages=["navigable_collections", "navigable_collections._src"],
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest"],
    },
    long_description = long_description,
    long_description_content_type = "text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
