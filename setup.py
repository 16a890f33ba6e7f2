#!/usr/bin/env python
from setuptools import setup, find_packages


setup(name='django-yopay',
      version='0.1.0',
      url='https://github.com/yopay/django-yopay',
      description="Yo! Payments mobile money module for Django",
      long_description=open('README.rst').read(),
      keywords="Payment, Yo! Payments, Mobile money",
      license='BSD',
      packages=find_packages(exclude=['tests*']),
      include_package_data=True,
      python_requires='>=3.8',
      install_requires=[
          'Django>=3.2',
          'cryptography>=3.1',
      ],
      extras_require={
          'test': [
              'pytest',
              'pytest-django',
          ],
      },
      # See http://pypi.python.org/pypi?%3Aaction=list_classifiers
      classifiers=[
          'Environment :: Web Environment',
          'Framework :: Django',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: BSD License',
          'Operating System :: Unix',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
      ]
    )
