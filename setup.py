import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="rtgeom",
    version="0.1.0",
    author="Michael J Hayford",
    author_email="mjhoptics@gmail.com",
    description="Fixed size vector and point primitives for ray tracing",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="BSD-3-Clause",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    keywords=['vector', 'point', 'linear algebra', 'ray tracing',
              'geometry', 'orthonormal basis'],
    install_requires=[
        "numpy>=1.22.0",
        "attrs>=18.1.0",
        ],
    extras_require={
        'test':  ["pytest"],
    },
)
