"""
Hopcroft's algorithm for DFA minimization.

A preimage X refines a class Y into Y1 and Y2 if both

    Y1 := Y & X
    Y2 := Y - X

are non-empty. Hopcroft keeps a partition P and a queue Q of
splitters, which always is a subset of P. We keep R = P - Q instead:

    R := {{non-accepting states}}
    Q := {{accepting states with equal accepts} ...}
    while Q:
        move some A from Q to R
        for each symbol c:
            X := states leading into A on c
            replace each Y in R refined by X by the larger half,
                and add the smaller half to Q
            replace each Y in Q refined by X by both halves

Splitting R adds to Q, but the classes added cannot be refined by
the same X again, so both passes can run over the collections as they
stood before.

Never splitting by the non-accepting class is only sound for a total
transition function. Missing transitions therefore lead to a virtual
`SINK` state during refinement, which is dropped from the result.
"""

import logging

from .core import DanglingReference
from .dfa import DFA, State
from .preimage import PreimageIndex

_logger = logging.getLogger('lexmin')

# state numbers are non-negative
SINK = -1

def refine(x, y):
    """
    Return the halves `(y & x, y - x)` if `x` splits `y`, else
    `None`.
    """
    inside = y & x
    if not inside:
        return None
    outside = y - x
    if not outside:
        return None
    return inside, outside


def complete(dfa):
    """
    Return the state map of `dfa` with every missing transition
    leading to `SINK`, a non-accepting state looping on every symbol.
    """
    alphabet = dfa.alphabet()

    states = {}
    for num, state in dfa.states.items():
        transitions = {symbol: SINK for symbol in alphabet}
        transitions.update(state)
        states[num] = State(state.accepts, transitions)
    states[SINK] = State((), {symbol: SINK for symbol in alphabet})

    return states


def initial_partition(states):
    """
    Return the initial `(settled, pending)` collections for the state
    map `states`: the non-accepting states (if any) and the accepting
    states grouped by their accept sequences.
    """
    nonaccepting = []
    accept_groups = {}

    for num, state in states.items():
        if state.accepting:
            accept_groups.setdefault(state.accepts, []).append(num)
        else:
            nonaccepting.append(num)

    # classes must never be empty
    settled = [frozenset(nonaccepting)] if nonaccepting else []
    pending = [frozenset(group) for group in accept_groups.values()]
    return settled, pending


def group_equivalent_states(dfa, logger=None):
    """
    Partition the states of `dfa` into classes of equivalent states.
    """
    logger = logger or _logger

    states = complete(dfa)
    settled, pending = initial_partition(states)
    logger.debug("initial partition: %d non-accepting, %d accepting "
                 "class(es)", len(settled), len(pending))

    index = PreimageIndex(states)

    while pending:
        splitter = pending.pop()
        settled.append(splitter)

        for x in index.preimages(splitter):
            refined_settled = []
            smaller_halves = []
            for y in settled:
                halves = refine(x, y)
                if halves is None:
                    refined_settled.append(y)
                    continue

                small, large = sorted(halves, key=len)
                logger.debug("split %d states into %d and %d",
                             len(y), len(large), len(small))
                refined_settled.append(large)
                smaller_halves.append(small)

            refined_pending = []
            for y in pending:
                halves = refine(x, y)
                if halves is None:
                    refined_pending.append(y)
                else:
                    refined_pending.extend(halves)

            settled = refined_settled
            pending = refined_pending + smaller_halves

    classes = []
    for cls in settled:
        cls = cls - {SINK}
        if cls:
            classes.append(cls)
    return classes


def number_classes(classes, start_states):
    """
    Assign the new state numbers to the equivalence classes.

    The class containing the start state of condition i gets the
    number i. A class containing the start states of several
    conditions is listed once for each of them, the others get the
    numbers from `len(start_states)` on.

    Return a list of `(number, class)` pairs.
    """
    numbered = []
    next_number = len(start_states)

    for cls in classes:
        slots = [slot for slot, start in enumerate(start_states)
                 if start in cls]
        if not slots:
            numbered.append((next_number, cls))
            next_number += 1
        else:
            numbered.extend((slot, cls) for slot in slots)

    return numbered


def minimize_dfa(dfa, logger=None):
    """
    Return the minimal DFA equivalent to `dfa`. The start states of
    the result are numbered `0 .. k-1` in the order of the start
    conditions. `dfa` is not modified.
    """
    logger = logger or _logger

    classes = group_equivalent_states(dfa, logger)
    numbered = number_classes(classes, dfa.start_states)

    old_to_new = {}
    for num, cls in numbered:
        for old in cls:
            old_to_new[old] = num

    def get_new(old):
        try:
            return old_to_new[old]
        except KeyError:
            raise DanglingReference(old, "equivalence classes") from None

    states = {}
    for num, cls in numbered:
        old_states = [dfa.state(old) for old in sorted(cls)]

        # the accepts are the same for all states of a class
        accepts = [accept.renumber(get_new)
                   for accept in old_states[0].accepts]

        transitions = {}
        for old_state in old_states:
            for symbol, target in old_state:
                transitions[symbol] = get_new(target)

        states[num] = State(accepts, transitions)

    for slot, start in enumerate(dfa.start_states):
        if slot not in states:
            raise DanglingReference(start, "equivalence classes")

    minimized = DFA(range(len(dfa.start_states)), states)

    logger.info("minimized DFA from %d to %d states "
                "(%d equivalence classes)",
                len(dfa), len(minimized), len(classes))
    logger.debug("minimized DFA:\n%s", minimized.dump())

    return minimized
