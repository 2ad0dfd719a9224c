import setuptools


with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name="evnt",
    version="0.1.0",
    description="A local, file backed store for calendar events.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=['tests']),
    python_requires='>=3.7',
    classifiers=(
        "Programming Language :: Python :: 3",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: End Users/Desktop",
        "Operating System :: POSIX",
        "Topic :: Office/Business :: Scheduling",
        "Topic :: Utilities",
    ),
    install_requires=[
        "PyYAML>=5.1",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
