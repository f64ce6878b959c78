from setuptools import setup, find_packages

setup(
    name='tropical',
    license='Apache 2.0',
    description='Max-plus and min-plus tropical semirings with dense matrix algebra',
    version='0.0.dev1',
    packages=find_packages(exclude=['tests']),
    install_requires=['numpy',
                      'tabulate'],
    python_requires='>=3.6',
)
