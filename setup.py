from setuptools import setup, find_packages

setup(
    name="content-pipeline-setup",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        line.strip()
        for line in open("requirements.txt")
        if line.strip() and not line.startswith("#")
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
            "black",
            "flake8",
            "pre-commit",
        ],
    },
    entry_points={
        "console_scripts": [
            "pipeline-setup=pipeline_setup.cli:main",
        ],
    },
    python_requires=">=3.8",
    description="Interactive setup tools for a WordPress content publishing pipeline",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
