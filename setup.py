from setuptools import setup, find_packages

setup(
    name="burstlog",
    version="0.1.0",
    packages=find_packages(include=["burstlog", "burstlog.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.7",
        "pydantic-settings>=2.3",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
)
