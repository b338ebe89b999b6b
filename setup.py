from setuptools import setup, find_packages

setup(
    name="maturity-engine",
    version="0.1.0",
    description="Scores security-maturity self-assessments and derives gaps, framework coverage and a remediation roadmap",
    author="Sumit Asthana",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"maturity": ["config/*.yaml"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "structlog>=23.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "maturity-engine=maturity.cli:main",
        ],
    },
)
