import os

from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))
README = open(os.path.join(here, 'README.txt')).read()
CHANGES = open(os.path.join(here, 'CHANGES.txt')).read()

requires = [
    'SQLAlchemy',
    ]

tests_require = [
    'pytest',
    ]

setup(
    name="assetpack",
    version='0.1.0',
    description="assetpack, static asset to SQL seed compiler",
    long_description=README + '\n\n' + CHANGES,
    classifiers=[
      "Programming Language :: Python",
      "Programming Language :: Python :: 3",
      "Topic :: Database",
      ],
    keywords='assets sql postgresql bytea',
    author="Takahiro Yoshimura",
    author_email="altakey@gmail.com",
    url="http://github.com/taky/assetpack",
    license='GPL',
    packages=find_packages(exclude=['tests']),
    python_requires='>=3.9',
    install_requires = requires,
    extras_require = {'test': tests_require},
    include_package_data=True,
    zip_safe=False,
    entry_points="""\
      [console_scripts]
      assetpack-compile = assetpack.script.compile:main
      """,
)
