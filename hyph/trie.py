import numpy as np

DIGITS = frozenset('0123456789')


class PatternError(ValueError):
    """A hyphenation pattern or exception that cannot be inserted."""


class FrozenCorpusError(RuntimeError):
    """Raised when a built corpus is mutated."""


def parse_pattern(pattern):
    # Convert a pattern like '.a1bc3d4' into the chars '.abcd' and the
    # weights [0, 0, 1, 0, 3, 4].  Entry j is the weight before char j; a
    # trailing digit adds the weight after the last char.
    if not pattern:
        raise PatternError('empty pattern')
    if pattern[0] in DIGITS:
        raise PatternError(f'pattern {pattern!r} starts with a digit')

    chars = []
    weights = []
    pending = None
    for c in pattern:
        if c in DIGITS:
            if pending is not None:
                raise PatternError(f'pattern {pattern!r} has consecutive digits')
            pending = int(c)
        else:
            chars.append(c)
            weights.append(pending or 0)
            pending = None
    if pending is not None:
        weights.append(pending)
    return ''.join(chars), weights


class WeightedTrie:
    """Liang patterns keyed letter by letter.

    Each character finds a dict another level down in the tree; the node
    reached by the last letter of a pattern keeps its weights under None.
    """

    def __init__(self):
        self.tree = {}
        self.count = 0
        self._frozen = False

    def __len__(self):
        return self.count

    @property
    def frozen(self):
        return self._frozen

    def insert(self, pattern):
        if self._frozen:
            raise FrozenCorpusError(f'cannot insert {pattern!r} into a frozen trie')
        chars, weights = parse_pattern(pattern)

        t = self.tree
        for c in chars:
            t = t.setdefault(c, {})
        t[None] = np.array(weights, dtype=np.uint8)
        self.count += 1

    def freeze(self):
        if self._frozen:
            return
        stack = [self.tree]
        while stack:
            t = stack.pop()
            for c, child in t.items():
                if c is None:
                    child.flags.writeable = False
                else:
                    stack.append(child)
        self._frozen = True

    def fetch(self, chars):
        """Return the maximum weight before every position of chars.

        Every pattern matching a substring of chars, at any offset, is
        overlaid onto the result with an elementwise maximum.
        """
        n = len(chars)
        # One spare slot for a trailing weight after the last char.
        points = np.zeros(n + 1, dtype=np.uint8)
        for i in range(n):
            t = self.tree
            for c in chars[i:]:
                if c not in t:
                    break
                t = t[c]
                p = t.get(None)
                if p is not None:
                    window = points[i:i + len(p)]
                    np.maximum(window, p, out=window)
        return points[:n]
