from setuptools import setup, find_packages

try:
    with open('README.md') as file:
        long_desc = file.read()
except IOError:
    long_desc = ''


setup(
    name='python-solrcursor',
    version='0.1.0',
    description=('Cursor-mark paginated Solr result iterator with optional Django integration.'),
    author='Lincolwn Martins',
    author_email='lincolwn@gmail.com',
    keywords='solr search cursor pagination django',
    packages=find_packages(exclude=['tests', 'tests.*']),
    license='MIT License',
    long_description=long_desc,
    python_requires='>=3.7',
    install_requires=['requests'],
    extras_require={
        'django': ['Django'],
        'test': ['pytest', 'Django'],
    },
)
