"""Setup script for HTML Table Reader."""

from setuptools import setup, find_packages
import os


# Read the README file
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return "HTML Table Reader - extract a data table from an HTML document"


setup(
    name='html-table-reader',
    version='0.1.0',
    description='Extract a single data table from an HTML page or file',
    long_description=read_readme(),
    long_description_content_type='text/markdown',
    author='HTML Table Reader Team',
    author_email='dev@example.com',

    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[
        'requests>=2.31.0',
        'beautifulsoup4>=4.12.0',
        'soupsieve>=2.4',
        'lxml>=4.9.0',
        'pydantic>=2.0.0',
        'click>=8.1.0',
        'python-dotenv>=1.0.0',
        'pyyaml>=6.0',
    ],

    extras_require={
        'html5lib': ['html5lib>=1.1'],
        'dev': [
            'pytest>=7.4.0',
            'pytest-cov>=4.1.0',
            'requests-mock>=1.11.0',
            'black>=23.0.0',
            'flake8>=6.0.0',
        ],
    },

    entry_points={
        'console_scripts': [
            'html-table-reader=html_table_reader.cli:main',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Internet :: WWW/HTTP :: Indexing/Search',
        'Topic :: Text Processing :: Markup :: HTML',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],

    keywords='html table scraping beautifulsoup',

    include_package_data=True,
    zip_safe=False,
)
