from setuptools import setup
from argmap.const import VERSION_STR, DESCRIPTION

setup(
    name="argmap",
    version=VERSION_STR,
    python_requires='>=3.10',
    description=DESCRIPTION,
    packages=["argmap"],
    install_requires=[
        "graphviz"
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "argmap = argmap:main",
            "argmap-wc = argmap.wc:main",
        ],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
