
__version__ = '0.1'

from .accept import Accept, StateContext, CodeContext
from .core import CantHappen, DanglingReference
from .dfa import DFA, State
from .minimize import minimize_dfa
