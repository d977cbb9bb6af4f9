from setuptools import setup, find_packages

from keeperfolders import __version__

install_requires = [
    'cryptography>=39.0.1',
    'requests>=2.31.0',
    'tabulate',
]

tests_require = [
    'pytest',
]

if __name__ == '__main__':
    setup(
        name='keeperfolders',
        version=__version__,
        description='Keeper Folders. Encrypted folder store with server sync',
        python_requires='>=3.8',
        packages=find_packages(include=['keeperfolders', 'keeperfolders.*']),
        install_requires=install_requires,
        extras_require={'test': tests_require},
        entry_points={
            'console_scripts': [
                'keeper-folders=keeperfolders.__main__:main',
            ],
        },
    )
