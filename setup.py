from setuptools import find_packages, setup


setup(
    name="hazard-intel-core",
    version="0.1.0",
    description="Geospatial clustering and social-media text mining for maritime hazard reports",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"processors": ["data/*.json"]},
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0.0",
        "spacy>=3.5.0",
        "vaderSentiment>=3.3.2",
        "prometheus-client>=0.17.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
)
