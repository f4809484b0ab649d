from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    '''Persistent string-keyed byte store.

    Implementations raise StoreError when the backend fails; a missing key
    is not an error and reads as None.
    '''

    def get(self, key: str) -> Optional[bytes]:
        pass

    def set(self, key: str, value: bytes) -> None:
        pass

    def delete(self, key: str) -> None:
        pass
