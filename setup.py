from setuptools import setup, find_packages

# Read requirements
with open("requirements.txt") as f:
    required = [line for line in f.read().splitlines() if line and not line.startswith("#")]

setup(
    name="zoneplanner",
    version="0.1",
    packages=find_packages(include=["zoneplanner", "zoneplanner.*"]),
    include_package_data=True,
    install_requires=required,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "zoneplanner=zoneplanner.main:main",
        ],
    },
)
