from setuptools import setup, find_packages

setup(
    name="pyxxh32",
    version="0.1.0",
    description="Pure-Python streaming xxHash32. Feed bytes in any chunking and get the same 4-byte digest as hashing the whole input at once; fast non-cryptographic checksums and fingerprints.",
    long_description=open("Readme.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[],
    extras_require={
        "dataframes": ["pandas<3"],
        "arrow": ["pyarrow"],
        "polars": ["polars"],
        "numpy": ["numpy"],
        "test": ["pytest", "xxhash"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
)
