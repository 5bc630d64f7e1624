from setuptools import setup, find_packages

setup(
    name="poisson-points",
    version="1.2.0",
    packages=find_packages(exclude=["tests", "tests.*"]),  # points_api and its services
    include_package_data=True,
    package_data={"points_api": ["constants.json"]},
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.22",
        "fastapi>=0.95.0",
        "uvicorn[standard]>=0.22.0",
        "pydantic>=2.0",
        "python-dotenv>=1.1.1",
        "Pillow>=9.1",
    ],
    extras_require={
        "dev": ["pytest", "httpx"],  # for testing
    },
    entry_points={
        "console_scripts": [
            "poisson-points=points_api.cli:main",
        ],
    },
)
