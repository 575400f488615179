import os

from setuptools import setup, find_packages

version_file = os.path.join(os.path.dirname(__file__), "backparsec", "version.py",)
with open(version_file, "r") as f:
    exec(f.read())

setup(
    name="backparsec",
    version=__version__,  # noqa: F821
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    description="Backtracking parser combinators producing lazy streams of candidate parses.",
    license="GPLv2",
    python_requires=">=3.7",
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v2 (GPLv2)",
        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
    ],
    keywords="parser combinator backtracking",
    entry_points={"console_scripts": []},
)
