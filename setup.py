from setuptools import setup, find_packages

setup(
    name="anomaly-voyage",
    version="0.1.0",
    packages=find_packages(include=["anomaly_voyage", "anomaly_voyage.*"]),
    py_modules=["run_anomaly_detection"],
    install_requires=[
        "pandas>=2.2.0",
        "numpy>=1.26.0",
        "pydantic>=2.5.0",
        "typeguard>=4.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    author="Your Name",
    description="Rule-based anomaly detection and statistics for Titanic passengers",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.9",
        "Topic :: Scientific/Engineering :: Information Analysis",
    ],
    entry_points={
        'console_scripts': [
            'run-anomaly-detection=run_anomaly_detection:main',
        ],
    },
    include_package_data=True,
    package_data={
        'anomaly_voyage': [
            'data/sample/*.csv',
        ],
    },
)
