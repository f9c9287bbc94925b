'''
Static typing protocols for I/O operations.
'''

import dataclasses
from typing import Any, Protocol, Self, cast


__all__ = ['JSONSerializable']


class JSONSerializable(Protocol):
    def toJSON(self) -> dict[str, Any]:
        '''Serialize the object into a JSON-compatible dictionary.'''
        if dataclasses.is_dataclass(self):
            return {
                field.name: getattr(self, field.name)
                for field in dataclasses.fields(self)
            }
        raise NotImplementedError()

    @classmethod
    def fromJSON(cls, obj: dict[str, Any]) -> Self:
        '''
        Deserialize an object from JSON data.

        :raise ValueError: `obj` names a field that `cls` does not have.
        '''
        if dataclasses.is_dataclass(cls):
            known = {f.name for f in dataclasses.fields(cls) if f.init}
            unknown = sorted(set(obj) - known)
            if unknown:
                raise ValueError(
                    f'unknown {cls.__name__} field(s): {", ".join(unknown)}'
                )
        return cast(Self, cls(**obj))
