project          = 'fibheap'
copyright        = '2026'
templates_path   = ['_templates']
exclude_patterns = []

extensions = [
	'sphinx.ext.autodoc',
	'sphinx.ext.mathjax',
	'sphinx.ext.intersphinx',
	'sphinx.ext.viewcode',
]

autodoc_typehints = 'both'

intersphinx_mapping = {
	'python': ('https://docs.python.org/3', None),
	'lenses': ('https://python-lenses.readthedocs.io/en/latest', None),
}

import sphinx_rtd_theme
html_theme      = 'sphinx_rtd_theme'

import builtins
builtins.__sphinx_build__ = True

import sys
import os
sys.path.insert(0, os.path.abspath('../..'))
