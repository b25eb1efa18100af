import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pointgeom",
    version="0.1",
    description="Fixed-dimension 2D/3D/N-D points over a numeric scalar type",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["pointgeom", "pointgeom.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.10',
    install_requires=[
        "attrs",
        "expression>=5",
        "numpy",
        "numpydoc_decorator",
    ],
    extras_require={
        "test": ["hypothesis", "pytest"],
    },
)
