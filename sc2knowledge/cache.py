from functools import wraps


def property_cache_forever(f):
    """
    Read-only property computed on first access and stored on the instance.

    Only for values derived from data that never changes after construction.
    """

    @wraps(f)
    def inner(self):
        property_cache = "_cache_" + f.__name__
        if not hasattr(self, property_cache):
            setattr(self, property_cache, f(self))
        return getattr(self, property_cache)

    return property(inner)
