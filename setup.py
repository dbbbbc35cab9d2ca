from setuptools import setup

# https://packaging.python.org/en/latest/guides/making-a-pypi-friendly-readme/
# read the contents of your README file
from pathlib import Path
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

setup(
    name="contain-exactly",
    version="0.1.0",
    description=("Order-insensitive collection matching which reports the "
                 "missing and extra items of the best possible pairing"),
    long_description=long_description,
    long_description_content_type='text/markdown',
    author="Louis Wust",
    author_email="louiswust@fastmail.fm",
    packages=["contain_exactly"],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.6",
        "Programming Language :: Python :: 3.9",
        "Topic :: Software Development :: Testing",
        "Topic :: Utilities"
    ],
    license="MIT License",
    package_dir={"": "src"},
    install_requires=[],
    entry_points={
        'console_scripts': [
            'contain-exactly = contain_exactly.main:main'
        ]
    },
    python_requires=">= 3.6.1"
)
