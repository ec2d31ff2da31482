from setuptools import setup, find_packages

setup(
    name="cnamesweep",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "dnspython>=2.4",
        "backoff>=2.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "cnamesweep = cnamesweep.cli:main",
        ],
    },
    description="Dangling CNAME and Subdomain Takeover Scanner",
    license="MIT",
    keywords="dns cname subdomain takeover security",
)
