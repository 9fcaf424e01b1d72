"""Setup script for ecgroups package."""

from setuptools import setup, find_packages

setup(
    name="ecgroups",
    use_scm_version={"fallback_version": "0.1.0"},
    setup_requires=['setuptools_scm'],
    description="Prime field, elliptic curve point and group primitives for ECDSA",
    packages=find_packages(include=["ecgroups", "ecgroups.*"]),
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
)
