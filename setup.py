import setuptools


def long_description():
    with open('README.md', 'r') as file:
        return file.read()


setuptools.setup(
    name='hostsfile',
    version='0.1.0',
    description='Parse hosts files line by line',
    long_description=long_description(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
    ],
    keywords='hosts etc-hosts parser',
    python_requires='>=3.6',
    test_suite='tests',
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
)
