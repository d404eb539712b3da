from setuptools import setup

setup(
    name='monkey-lexer',
    version='0.1.0',
    description='Lexical scanner for the Monkey programming language',
    package_dir={'monkey': 'src/monkey'},
    packages=['monkey', 'monkey.cli'],
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=10.0'
    ],
    extras_require={
        'test': ['pytest>=7.0']
    },
    entry_points={
        'console_scripts': [
            'monkey = monkey.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
