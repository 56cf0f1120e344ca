from setuptools import setup, find_packages

setup(
    name="iconify-loader",
    version="1.0.0",
    packages=find_packages(include=["iconify_loader", "iconify_loader.*"]),
    package_data={"iconify_loader": ["config/*.yaml"]},
    python_requires=">=3.8",
    install_requires=[
        "lxml",
        "pyyaml",
    ],
    extras_require={
        "api": ["fastapi", "uvicorn", "python-multipart"],
        "test": ["pytest", "fastapi", "httpx", "python-multipart"],
    },
    entry_points={
        "console_scripts": [
            "iconify-loader=iconify_loader.main:main",
        ],
    },
)
