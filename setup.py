from setuptools import setup, find_packages

setup(
    name='clockiReport',
    version='0.1.0',
    description='A CLI tool printing the distinct tasks tracked in Clockify on a given day.',
    packages=find_packages(exclude=['tests']),
    install_requires=[
        'requests',
        'tabulate',
        'python-dotenv',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'clockireport=clockireport.__main__:main',
        ],
    },
    include_package_data=True,
    package_data={
        '': ['clockireport.env.example'],
    },
    python_requires='>=3.7',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
