from setuptools import setup, find_packages

setup(
    name="pangram",
    version="0.0.1",
    description="Interactive terminal pangram checker",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        # curses ships with CPython on Linux and macOS.
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "pangram=pangram.main:main",
        ],
    },
)
