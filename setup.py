from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="distinct-collections",
    version="1.0.0",
    description="Array-like collections with distinct elements, constant time membership and position lookups, and configurable key functions.",
    packages=["distinct_collections", "distinct_collections._src"],
    python_requires=">=3.8",
    extras_require={"test": ["pytest"]},
    author="distinct-collections contributors",
    long_description = long_description,
    long_description_content_type = "text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
