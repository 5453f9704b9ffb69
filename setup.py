from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="newsportal",
    version="0.1.0",
    author="DeFi Bank",
    description="A small Flask news publishing backend with Google OAuth admin and share-preview pages",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["newsportal", "newsportal.*"]),
    py_modules=["main"],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Framework :: Flask",
    ],
    python_requires=">=3.9",
    install_requires=[
        "Flask>=3.0.0",
        "Jinja2>=3.1.0",
        "click>=8.1.0",
        "python-dotenv>=1.0.0",
        "requests>=2.28.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "black>=22.0",
            "flake8>=5.0",
        ],
    },
    include_package_data=True,
    package_data={
        "newsportal": [
            "modules/*/templates/**/*.html",
        ],
    },
    zip_safe=False,
)
