
class CantHappen(Exception):
    """
    Exception raised when an invariant established by an earlier
    stage of the lexer generator turns out to be broken.
    """
    def __init__(self, detail=None):
        message = "It seems you just found a bug"
        if detail is not None:
            message += " ({})".format(detail)
        super().__init__(message + "\n\nPlease report this.")

class DanglingReference(CantHappen):

    def __init__(self, reference, where):
        """
        `reference` was looked up in `where` (a short description
        of the map, e.g. "state map") and is not there.
        """
        super().__init__("id {!r} absent from {}".format(reference, where))
        self.reference = reference
        self.where = where
