import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="regionfile",
    version="0.0.1",
    description="Inspect and extract chunks from region files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=['tests']),
    scripts=['scripts/regiontool.py'],
    entry_points={
        'console_scripts': [
            'regiontool=regionfile.cli:main',
        ],
    },
    install_requires=[
        'bitstring',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
