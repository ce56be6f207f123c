
from .accept import StateContext
from .core import DanglingReference

class State(object):
    """
    A DFA state: the accept actions (in order of preference, empty for
    non-accepting states) and the transitions, a partial map from
    input symbol to target state number.
    """

    __slots__ = ('_accepts', '_transitions')

    def __init__(self, accepts=(), transitions=None):
        self._accepts = tuple(accepts)
        self._transitions = dict(transitions or {})

    def __iter__(self):
        return iter(self._transitions.items())

    def __eq__(self, other):
        return isinstance(other, State) \
            and self._accepts == other._accepts \
            and self._transitions == other._transitions

    def __repr__(self):
        return "State(%r, %r)" % (self._accepts, self._transitions)

    @property
    def accepts(self):
        return self._accepts

    @property
    def accepting(self):
        return bool(self._accepts)

    def move(self, symbol):
        """
        Get the target of the transition on `symbol` or `None`.
        """
        return self._transitions.get(symbol)

    def renumber(self, get_new):
        """
        Return a copy of the state with all referenced state numbers
        mapped through `get_new`.
        """
        return State((accept.renumber(get_new) for accept in self._accepts),
                     {symbol: get_new(target)
                      for symbol, target in self._transitions.items()})


class DFA(object):
    """
    A lexing DFA with one start state per start condition.

    `start_states` is the sequence of start state numbers, in the
    order of the start conditions, `states` maps state numbers to
    `State` objects.
    """

    def __init__(self, start_states, states):
        self._start_states = tuple(start_states)
        self._states = dict(states)

    def __len__(self):
        return len(self._states)

    def __eq__(self, other):
        return isinstance(other, DFA) \
            and self._start_states == other._start_states \
            and self._states == other._states

    def __repr__(self):
        return "DFA(%r, %r)" % (self._start_states, self._states)

    @property
    def start_states(self):
        return self._start_states

    @property
    def states(self):
        return dict(self._states)

    def state(self, num):
        try:
            return self._states[num]
        except KeyError:
            raise DanglingReference(num, "state map") from None

    def alphabet(self):
        """
        The symbols used by any transition, in order of appearance.
        """
        symbols = {}
        for state in self._states.values():
            for symbol, _ in state:
                symbols[symbol] = None
        return list(symbols)

    def check(self):
        """
        Verify that every start state, transition target and right
        context refers to a state of this DFA.
        """
        for start in self._start_states:
            self.state(start)

        for state in self._states.values():
            for _, target in state:
                self.state(target)
            for accept in state.accepts:
                if isinstance(accept.right_context, StateContext):
                    self.state(accept.right_context.state)

    def run(self, symbols, condition=0):
        """
        Feed `symbols` to the DFA starting in the start state of
        `condition`. Return the number of the reached state or `None`
        if the DFA got stuck on the way.
        """
        current = self._start_states[condition]
        for symbol in symbols:
            current = self.state(current).move(symbol)
            if current is None:
                return None
        return current

    def accepts_after(self, symbols, condition=0):
        current = self.run(symbols, condition)
        if current is None:
            return ()
        return self.state(current).accepts

    def minimize(self, logger=None):
        # circular
        from .minimize import minimize_dfa
        return minimize_dfa(self, logger)

    def dump(self):
        lines = ["start: " + " ".join(map(str, self._start_states))]
        for num in sorted(self._states):
            state = self._states[num]
            moves = ", ".join("{!r} -> {}".format(symbol, target)
                              for symbol, target in state)
            line = "{:4d}: {}".format(num, moves)
            if state.accepting:
                line += "  accepts " + \
                    ", ".join(map(repr, state.accepts))
            lines.append(line)
        return "\n".join(lines)
