from setuptools import setup, find_packages

version = '0.0.1'

setup(name='tilenames',
      version=version,
      description="Conversions between lon/lat and slippy map tile names.",
      long_description=open('README.md').read(),
      long_description_content_type='text/markdown',
      classifiers=[
          # strings from http://pypi.python.org/pypi?%3Aaction=list_classifiers
          'Development Status :: 4 - Beta',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: MIT License',
          'Natural Language :: English',
          'Operating System :: OS Independent',
          'Programming Language :: Python :: 3',
          'Programming Language :: Python :: Implementation :: CPython',
          'Topic :: Scientific/Engineering :: GIS',
          'Topic :: Utilities',
      ],
      keywords='map tile mercator slippy xyz',
      license='MIT',
      packages=find_packages(exclude=['ez_setup', 'examples', 'tests']),
      include_package_data=True,
      zip_safe=False,
      python_requires='>=3.6',
      install_requires=[
          'numpy',
          'PyYAML',
      ],
      test_suite='tests',
)
