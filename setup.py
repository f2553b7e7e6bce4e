from setuptools import setup, find_packages

setup(
    name="inline-extract",
    version="1.0.0",
    packages=find_packages(),
    install_requires=[
        'beautifulsoup4',
        'cssutils',
        'chardet',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'pytest-timeout',
        ],
    },
    entry_points={
        'console_scripts': [
            'inline-extract=inline_extract.cli:main',
        ],
    },
    python_requires='>=3.7',
    description="Convert inline HTML styles into a consolidated stylesheet",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
