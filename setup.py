import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("bigint/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="bigint",
    version=version,
    description="Arbitrary-precision signed integers in base-10000 blocks, with floor division.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
            # arbitrary precision
            # bignum
    ],
)
