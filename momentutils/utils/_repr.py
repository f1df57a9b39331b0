# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Define tools for class __repr__ strings.
"""


def make_repr(instance, params):
    """
    Generate a __repr__ string for a class instance.

    Parameters
    ----------
    instance : object
        The class instance.

    params : str or list of str
        List of attribute (or property) names to include in the repr.
        The order of returned parameters is the same as the order of
        ``params``.

    Returns
    -------
    repr_str : str
        The generated __repr__ string.
    """
    if isinstance(params, str):
        params = [params]

    cls_info = []
    for param in params:
        if not hasattr(instance, param):
            msg = f'Parameter {param!r} not found in instance'
            raise ValueError(msg)
        cls_info.append(f'{param}={getattr(instance, param)!r}')

    return f'{instance.__class__.__name__}({", ".join(cls_info)})'
