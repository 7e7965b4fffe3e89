# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="path-to-unicode-filename",
    version="0.1.0",
    description="Reversible encoding of filesystem paths into unicode filenames",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["path_to_unicode_filename*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'path-to-unicode-filename=path_to_unicode_filename.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
