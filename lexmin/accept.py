
import operator
from functools import reduce

class RightContext(object):
    """
    The trailing context a match has to be followed by.

    Right contexts compare and hash by their members, as they become
    part of the accept sequences the minimizer groups states by.
    """

    def __eq__(self, other):
        return self.__class__ == other.__class__ \
            and self.__dict__ == other.__dict__

    def __hash__(self):
        return reduce(operator.__xor__,
                      map(hash, self.__dict__.items()),
                      hash(self.__class__.__name__))

    def renumber(self, get_new):
        """
        Return the context with referenced state numbers mapped
        through `get_new`.
        """
        raise NotImplementedError()

class StateContext(RightContext):
    """
    A trailing regular expression. It is compiled into the same
    automaton, `state` is the number of its start state.
    """

    def __init__(self, state):
        self._state = state

    def __repr__(self):
        return "StateContext(%d)" % self.state

    @property
    def state(self):
        return self._state

    def renumber(self, get_new):
        return StateContext(get_new(self._state))

class CodeContext(RightContext):
    """
    A user supplied predicate, deciding on the trailing input.
    """

    def __init__(self, name):
        self._name = name

    def __repr__(self):
        return "CodeContext('%s')" % self.name

    @property
    def name(self):
        return self._name

    def renumber(self, get_new):
        return self


class Accept(object):
    """
    An accept action of a DFA state.

    `action` (e.g. the token to emit), `priority` and `left_context`
    are opaque to the minimizer, they only have to be hashable.
    `right_context` is `None` or a `RightContext`.
    """

    __slots__ = ('_action', '_priority', '_left_context', '_right_context')

    def __init__(self, action, priority=None, left_context=None,
                 right_context=None):
        self._action = action
        self._priority = priority
        self._left_context = left_context
        self._right_context = right_context

    @property
    def action(self):
        return self._action

    @property
    def priority(self):
        return self._priority

    @property
    def left_context(self):
        return self._left_context

    @property
    def right_context(self):
        return self._right_context

    def _key(self):
        return (self._action, self._priority,
                self._left_context, self._right_context)

    def __eq__(self, other):
        return isinstance(other, Accept) and self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        args = [repr(self._action)]
        if self._priority is not None:
            args.append("priority=%r" % (self._priority,))
        if self._left_context is not None:
            args.append("left_context=%r" % (self._left_context,))
        if self._right_context is not None:
            args.append("right_context=%r" % (self._right_context,))
        return "Accept(" + ", ".join(args) + ")"

    def renumber(self, get_new):
        """
        Return a copy, with the state referenced by the right context
        (if any) mapped through `get_new`.
        """
        if self._right_context is None:
            return self

        return Accept(self._action, self._priority, self._left_context,
                      self._right_context.renumber(get_new))
