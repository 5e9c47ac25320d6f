from setuptools import setup, find_packages

setup(
    name='llapctl',
    version='0.1.0',
    packages=find_packages(),
    include_package_data=True,
    install_requires=[
        'typer',
        'click',
        'jsonschema',
        'python-dotenv',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'llapctl=llapctl.cli:app'
        ]
    },
    description='Option parsing and validation for launching LLAP compute-cache clusters',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
