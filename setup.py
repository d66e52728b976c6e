from setuptools import setup

setup(
    name='sc2knowledge',
    version='0.1.0',
    packages=[
        "sc2knowledge",
        "sc2knowledge.configs",
        "sc2knowledge.ids"
    ],
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21",
        "loguru>=0.6.0",
    ],
    extras_require={
        "tests": [
            "pytest>=7.0",
        ]
    }
)
