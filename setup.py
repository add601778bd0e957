"""Setup script for hunt CLI tool"""

from setuptools import setup, find_packages

with open('requirements.txt') as f:
    requirements = f.read().splitlines()

setup(
    name='hunt',
    version='0.1.0',
    description='Open one search across many engines from your terminal',
    author='Your Name',
    python_requires='>=3.9',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    package_data={'hunt': ['search_engines.json']},
    install_requires=requirements,
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'hunt=hunt:cli',
        ],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: End Users/Desktop',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
