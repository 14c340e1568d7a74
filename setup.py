from setuptools import setup, find_packages

setup(
    name="cvdraw",
    version="0.1.0",
    description="Raster drawing primitives and colour traits for numpy images",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.23",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "Pillow>=9.0",
        ],
    },
)
