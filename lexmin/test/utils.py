import logging
import unittest
from itertools import product

from ..accept import StateContext
from ..dfa import DFA, State

# perhaps I should just use logging.shutdown
# and reinitialize afterwards, I am afraid
# they don't die this way
def counted_make_logger(name):
    LOGGER_COUNTER = 0
    def get_logger():
        nonlocal LOGGER_COUNTER
        res = logging.getLogger('{}{}'.format(name, LOGGER_COUNTER))
        LOGGER_COUNTER += 1
        return res
    return get_logger

unique_logger = counted_make_logger('lexmintest')

class CheckingHandler(logging.Handler):

    def __init__(self, logmessages):
        """
        A handler to check the emitted messages with a coroutine
        `logmessages`.  `next` is once applied to `logmessages`,
        afterwards the logging records are passed to it via `.send()`.

        If `logmessages` raises *StopIteration* an assertion will
        fail.
        """
        super().__init__()
        self.checker = logmessages
        next(self.checker)

    def emit(self, record):
        try:
            self.checker.send(record)
        except StopIteration:
            assert False

class FailOnLogHandler(logging.Handler):

    def __init__(self, test_case):
        """
        A handler designed to fail, whenever anything is
        logged. `test_case` is the instance of a `TestCase` to which
        the failure shall be reported.
        """
        super().__init__()
        self.test_case = test_case

    def emit(self, record):
        self.test_case.fail("unexpected log message during minimization: {}"
                            .format(record.getMessage()))


def make_dfa(start_states, table):
    """
    Build a DFA from `table`, a dict mapping state numbers to
    `(accepts, transitions)` pairs.
    """
    return DFA(start_states,
               {num: State(accepts, transitions)
                for num, (accepts, transitions) in table.items()})


def resolve(dfa, accepts):
    """
    Replace the state numbers in the right contexts of `accepts` by
    the set of strings of length <= 2 over `ab` the referenced state
    accepts, so accepts of different DFAs can be compared.
    """
    result = []
    for accept in accepts:
        context = accept.right_context
        if isinstance(context, StateContext):
            context = frozenset(
                word for word in words('ab', 2)
                if _reaches_accept(dfa, context.state, word))
        result.append((accept.action, accept.priority,
                       accept.left_context, context))
    return result


def _reaches_accept(dfa, state, word):
    for symbol in word:
        state = dfa.state(state).move(symbol)
        if state is None:
            return False
    return dfa.state(state).accepting


def words(alphabet, max_length):
    for length in range(max_length + 1):
        yield from product(alphabet, repeat=length)


class FailOnLogTestCase(unittest.TestCase):

    def minimize(self, dfa):
        self.logger = unique_logger()
        self.logger.addHandler(FailOnLogHandler(self))
        return dfa.minimize(self.logger)


class DFATestCase(unittest.TestCase):

    def assertPartition(self, classes, states):
        """
        Assert `classes` is a partition of `states`.
        """
        seen = set()
        for cls in classes:
            self.assertTrue(cls, "empty equivalence class")
            self.assertFalse(seen & cls, "state in two classes")
            seen |= cls
        self.assertEqual(seen, set(states))

    def assertSameLanguage(self, original, minimized, alphabet, max_length):
        """
        Assert that both DFAs arrive at the same accepts for every
        word over `alphabet` up to `max_length` and every start
        condition.
        """
        self.assertEqual(list(minimized.start_states),
                         list(range(len(original.start_states))))

        for condition in range(len(original.start_states)):
            for word in words(alphabet, max_length):
                self.assertEqual(
                    resolve(original,
                            original.accepts_after(word, condition)),
                    resolve(minimized,
                            minimized.accepts_after(word, condition)),
                    "word {!r} in condition {}".format(''.join(word),
                                                      condition))
