import os
import setuptools
import codecs

readme_path = os.path.join(os.path.dirname(__file__), 'README.rst')
with codecs.open(readme_path, encoding='utf8') as f:
    for line in f:
        if line.startswith('.. include_start_after'):
            break
    long_description = f.read()

requires_path = os.path.join(os.path.dirname(__file__), 'requirements.txt')
with codecs.open(requires_path, encoding='utf8') as f:
    install_requires = f.read()

requires_path = os.path.join(os.path.dirname(__file__), 'requirements_dev.txt')
with codecs.open(requires_path, encoding='utf8') as f:
    tests_require = f.read()

with open('fibheap/_version.py') as version_file:
    exec(version_file.read())

setuptools.setup(
    name='fibheap',
    version=__version__,
    description='Mergeable Fibonacci heap with addressable elements',
    long_description=long_description,
    long_description_content_type='text/x-rst',
    license='MIT',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3.7',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: Implementation :: PyPy',
    ],
    install_requires=install_requires,
    extras_require={'test': tests_require},
    scripts=[],
    packages=['fibheap'],
    package_data={'fibheap': ['py.typed']},
    python_requires='>=3.7',
)
