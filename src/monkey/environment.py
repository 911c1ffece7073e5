# src/monkey/environment.py
from .builtins import BUILTINS


class Environment:
    """A lexical scope frame: local bindings, an optional outer frame and
    the built-in table.

    Frames handed to closures are snapshots. ``snapshot()`` shares the
    current store with the new frame and marks both as shared; whichever
    side writes next copies the store first, so a closure never sees
    bindings made after it was created.
    """

    def __init__(self, outer=None, builtins=None):
        self.store = {}
        self.outer = outer
        self.builtins = BUILTINS if builtins is None else builtins
        self._shared = False

    def get(self, name, default=None):
        """Look a name up in this frame, then the outer chain."""
        env = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        return default

    def get_builtin(self, name):
        return self.builtins.get(name)

    def resolve(self, name):
        """Scope chain first; built-ins only when no binding shadows them."""
        value = self.get(name)
        if value is None:
            value = self.get_builtin(name)
        return value

    def set(self, name, value):
        """Bind a name in this frame (creates or replaces the local binding)."""
        if self._shared:
            self.store = dict(self.store)
            self._shared = False
        self.store[name] = value
        return value

    def snapshot(self):
        """Freeze the current bindings for a closure."""
        self._shared = True
        frozen = Environment(self.outer, self.builtins)
        frozen.store = self.store
        frozen._shared = True
        return frozen

    def new_enclosed(self):
        """Child scope for a function call."""
        return Environment(outer=self, builtins=self.builtins)

    def depth(self):
        depth, env = 0, self.outer
        while env is not None:
            depth += 1
            env = env.outer
        return depth

    def __repr__(self):
        return f"Environment(names={sorted(self.store)}, depth={self.depth()})"
