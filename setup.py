from setuptools import setup, find_packages

setup(
    name="antsy",
    version="0.1.0",
    description="ANSI-styled terminal text with nesting-aware resets",
    packages=find_packages(exclude=("tests", "examples")),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.12",
)
