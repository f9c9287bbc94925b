'''
Static typing protocols and helpers.
'''

from .cache import Handle, Pair
from .io import JSONSerializable

__all__ = [
    'Handle',
    'JSONSerializable',
    'Pair',
]
