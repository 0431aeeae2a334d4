"""
EV Range Studio
Real-world range estimates and long-distance ratings for electric vehicles
"""

from setuptools import setup, find_packages
import os

# Read the contents of README file
this_directory = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="ev-range-studio",
    version="1.0.0",
    author="Youssef Rekik",
    description="Real-world range estimates and long-distance ratings for electric vehicles",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.5.0",
        "numpy>=1.21.0",
        "plotly>=5.10.0",
        "streamlit>=1.33.0",
        "python-dotenv>=1.0.0",
        "pydantic>=2.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ev-range-studio=app.launcher:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
