# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="vimbutil",
    version="0.1.0",
    description="Filesystem and text helpers for vimb: path resolution, unique list files, temp files",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["vimbutil*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'vimbutil=vimbutil.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
    ],
)
