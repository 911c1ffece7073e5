# src/monkey/object.py
from functools import total_ordering


class Object:
    def inspect(self):
        raise NotImplementedError("Subclasses must implement this method")

    def type(self):
        raise NotImplementedError("Subclasses must implement this method")

    def describe(self):
        """``<inspect> : <Type>`` as the interactive shell prints values."""
        return f"{self.inspect()} : {self.type()}"

    def hash_key(self):
        return MapKey.unusable(self)

    def __repr__(self):
        return f"<{self.type()} {self.inspect()}>"


class Integer(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return str(self.value)
    def type(self): return "Integer"
    def hash_key(self): return MapKey(MapKey.INTEGER, self.value)


class Boolean(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return "true" if self.value else "false"
    def type(self): return "Boolean"
    def hash_key(self): return MapKey(MapKey.BOOLEAN, self.value)


class Null(Object):
    def inspect(self): return "null"
    def type(self): return "Null"
    def describe(self): return "Null"


class String(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value
    def type(self): return "String"
    def hash_key(self): return MapKey(MapKey.STRING, self.value)
    def __str__(self): return self.value


class Array(Object):
    def __init__(self, elements): self.elements = tuple(elements)
    def inspect(self):
        elements_str = ", ".join([el.inspect() for el in self.elements])
        return f"[{elements_str}]"
    def type(self): return "Array"


class ReturnValue(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value.inspect()
    def type(self): return "Return"


class Function(Object):
    def __init__(self, parameters, body, env):
        self.parameters, self.body, self.env = tuple(parameters), body, env

    def inspect(self):
        params = ", ".join([p.value for p in self.parameters])
        body = str(self.body)
        return f"fn({params}) {{ {body} }}" if body else f"fn({params}) {{ }}"

    def type(self): return "Function"
    def describe(self): return "Function"


class Builtin(Object):
    def __init__(self, fn, name=""):
        self.fn = fn  # the native Python callable
        self.name = name

    def inspect(self):
        return f"<built-in function: {self.name}>"

    def type(self):
        return "Builtin"


class EvaluationError(Object):
    """An evaluation-time error travelling as a value up to the caller."""

    def __init__(self, message):
        self.message = message

    def inspect(self):
        return f"ERROR: {self.message}"

    def type(self):
        return "Error"

    def __str__(self):
        return self.message


class Sentinel(Object):
    """Internal marker results that a program can never observe."""

    def __init__(self, name): self.name = name
    def inspect(self): return ""
    def type(self): return self.name


# `let` statement result; tells the top level there is nothing to display
LET = Sentinel("Let")
# result of an empty block or program
DEFAULT = Sentinel("Default")

# Shared singletons
NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)


@total_ordering
class MapKey:
    """Hashable, orderable projection of an Object used to key map storage."""

    INTEGER = "Integer"
    BOOLEAN = "Boolean"
    STRING = "String"
    UNUSABLE = "Unusable"

    _KIND_ORDER = {INTEGER: 0, BOOLEAN: 1, STRING: 2, UNUSABLE: 3}

    __slots__ = ("kind", "value")

    def __init__(self, kind, value):
        self.kind = kind
        self.value = value

    @classmethod
    def unusable(cls, obj):
        # the value records which Object type was rejected
        return cls(cls.UNUSABLE, obj.type())

    @property
    def usable(self):
        return self.kind != self.UNUSABLE

    def _sort_key(self):
        return (self._KIND_ORDER[self.kind], self.value)

    def __eq__(self, other):
        if not isinstance(other, MapKey):
            return NotImplemented
        # kinds keep Integer 1 and Boolean true apart
        return self.kind == other.kind and self.value == other.value

    def __lt__(self, other):
        if not isinstance(other, MapKey):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        return f"MapKey({self.kind}, {self.value!r})"


class MapPair:
    __slots__ = ("key", "value")

    def __init__(self, key, value):
        self.key = key
        self.value = value

    def __iter__(self):
        return iter((self.key, self.value))


class Map(Object):
    def __init__(self, pairs=None):
        self.pairs = pairs if pairs is not None else {}  # dict of MapKey -> MapPair

    def type(self): return "Map"

    def get(self, key):
        pair = self.pairs.get(key.hash_key())
        return None if pair is None else pair.value

    def inspect(self):
        pairs = []
        for pair in self.pairs.values():
            pairs.append(f"{pair.key.inspect()}: {pair.value.inspect()}")
        return "{" + ", ".join(pairs) + "}"
