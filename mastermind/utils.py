def spaced(items):
    """
    join the single character form of each item with spaces
    spaced([Color.RED, Color.BLUE]) == 'r b'
    """
    return ' '.join([str(item) for item in items])

class dotdict(dict):
    """dot.notation access to dictionary attributes"""
    __getattr__ = lambda self, key: self[key]
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__
