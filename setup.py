import os.path

from setuptools import find_packages, setup


def read(fname):
    path = os.path.join(os.path.dirname(__file__), fname)
    with open(path, "r") as rfile:
        return rfile.read()


metadata = {}
exec(read("lambdautils/__about__.py"), metadata)


setup(
    name="lambdautils",
    version=metadata["__version__"],
    description=metadata["__description__"],
    license="MIT",
    long_description=read("README.rst") + "\n\n" + read("HISTORY.rst"),
    author=metadata["__author__"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
    ],
    install_requires=[],
    extras_require={
        "test": ["pytest", "pytest-mock", "requests"],
    },
    keywords=[
        "functional",
        "lambda",
        "predicates",
        "collections",
        "mapping",
    ],
    python_requires=">=3.7",
    packages=find_packages(exclude=("examples", "tests", "docs", "tutorial")),
)
