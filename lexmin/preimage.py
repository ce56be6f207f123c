
class PreimageIndex(object):
    """
    The transition function of a DFA turned around: for each symbol a
    map from target state to the set of states reaching it on that
    symbol.
    """

    def __init__(self, states):
        self._index = {}

        for source, state in states.items():
            for symbol, target in state:
                self._index.setdefault(symbol, {}) \
                           .setdefault(target, set()) \
                           .add(source)

    def __len__(self):
        return len(self._index)

    @property
    def symbols(self):
        return list(self._index)

    def preimage(self, symbol, targets):
        """
        The states leading into `targets` on `symbol`. Empty if there
        are none.
        """
        sources = self._index.get(symbol)
        if sources is None:
            return frozenset()

        result = set()
        for target in targets:
            if target in sources:
                result |= sources[target]
        return frozenset(result)

    def preimages(self, targets):
        """
        Yield the non-empty preimages of `targets` for every symbol.
        """
        for symbol in self._index:
            preimage = self.preimage(symbol, targets)
            if preimage:
                yield preimage
