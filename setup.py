from __future__ import annotations

from setuptools import find_packages, setup


setup(
    name="coursealgs",
    version="0.1.0",
    description="Quick-find, quick-union, weighted quick-union and elementary sorts",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "unionfind = coursealgs.cli:union_find_main",
            "sortwords = coursealgs.cli:sort_main",
        ]
    },
)
