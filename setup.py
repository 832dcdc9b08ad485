import setuptools


with open('README.rst') as f:
    readme = f.read()


extras_require_test = [
    'coverage',
    'importlib_resources>=6.4',
    'mypy',
    'pytest',
    'pytest-cov',
    'tox',
]


setuptools.setup(
    name='wetwire-github',
    author='wetwire developers',
    description='Author GitHub Actions workflows as typed Python values',
    long_description=readme,
    long_description_content_type='text/x-rst',
    packages=setuptools.find_packages('src'),
    package_dir={'': 'src'},
    version='0.1.0',
    license='MIT',
    classifiers=[
        # complete classifier list:
        #   https://pypi.org/pypi?%3Aaction=list_classifiers
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Operating System :: POSIX :: Linux',
        'Operating System :: MacOS',
        'Operating System :: Microsoft :: Windows',
    ],
    python_requires='>=3.8',
    entry_points={
        'console_scripts': [
            'wetwire = wetwire.cli:cli'
        ],
    },
    install_requires=[
        'attrs',
        'click',
        'marshmallow>=3.10,<4',
        'marshmallow_polyfield',
        'pyrsistent',
        'pyyaml',
    ],
    extras_require={
        'test': extras_require_test,
    },
    package_data={
        'wetwire.tests.data': ['*.yml'],
    },
    include_package_data=True,
)
