import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="automower-connect",
    author="Thomas Protzner",
    author_email="thomas.protzner@gmail.com",
    description="module to read mowers from the Husqvarna Automower Connect API",
    license="Apache License 2.0",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/Thomas55555/aioautomower",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    install_requires=list(val.strip() for val in open("requirements.txt")),
    extras_require={
        "test": [
            "aioresponses>=0.7.6",
            # aioresponses 0.7.x is incompatible with aiohttp 3.14 (ClientResponse stream_writer)
            "aiohttp<3.14",
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "time-machine>=2.13",
        ],
    },
    version="2026.10.0",
    entry_points={
        "console_scripts": ["automower-connect=automower_connect.cli:main"],
    },
)
