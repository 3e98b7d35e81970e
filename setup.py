# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="iconjar",
    version="0.1.0",
    description="Compiler for portable .iconjar icon library archives",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["iconjar", "iconjar.*"]),
    python_requires=">=3.9",
    install_requires=[
        "Pillow",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'iconjar=iconjar.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
