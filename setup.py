from setuptools import setup


setup(
    name='formula',
    use_scm_version={
        'fallback_version': '0.1.0',
    },
    description='Infix arithmetic formulas, with recursively bound variables',
    install_requires=[
        'regex',
    ],
    packages=['formula'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    license='ISC',
)
