from setuptools import setup

import lexmin

setup(name='lexmin',
      version=lexmin.__version__,
      description='DFA minimization stage for lexer generators',
      packages=['lexmin', 'lexmin.test'],
      license='MIT',
      )
