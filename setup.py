from os import path

from setuptools import setup, find_namespace_packages

# Get the long description from the README file
here = path.abspath(path.dirname(__file__))
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="nrel.optionalbuilder",
    version="0.1.0",
    description=
    "combines two independently-optional values into a single derived optional value, synchronously or asynchronously.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.9",
        "Topic :: Software Development :: Libraries",
    ],
    packages=find_namespace_packages(include=["nrel.*"]),
    python_requires=">=3.9",
    install_requires=[
        "returns",
        "PyYAML",
        "rich",
    ],
    extras_require={
        "dev": ["pytest", "black"],
    },
    include_package_data=True,
    package_data={
        "nrel.optionalbuilder.resources.defaults": [".optionalbuilder.yaml"]
    },
    author="National Renewable Energy Laboratory",
    keywords="optional maybe combinator future asyncio"
)
