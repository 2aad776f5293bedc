from pathlib import Path
from setuptools import setup, find_packages

HERE = Path(__file__).parent
VERSION_FILE = HERE / "VERSION"
version = VERSION_FILE.read_text().strip() if VERSION_FILE.exists() else "0.3.0"

setup(
    name="salescope",
    version=version,
    description="Exploratory data analysis engine for video game sales tables",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.9",
    install_requires=[
        "pandas>=1.5,<3",
        "numpy>=1.23",
        "altair>=5.0",
        "streamlit>=1.28",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
