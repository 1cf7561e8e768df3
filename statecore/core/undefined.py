"""
The UNDEFINED sentinel.

None is a legitimate state value. UNDEFINED marks the absence of one: a slice
that does not exist yet, or a reducer result that breaks the reducer contract.
"""


class _Undefined:
    __slots__ = ()

    _instance = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()
