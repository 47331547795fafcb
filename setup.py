from setuptools import setup, find_packages

setup(
    name="hkbus-stops",
    version="0.1.0",
    description="Spatial and route queries over the static Hong Kong bus dataset.",
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        "requests",
        "python-dotenv",
        "platformdirs"
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.7',
)
