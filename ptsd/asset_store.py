"""A cache of loaded assets keyed by file path."""

from __future__ import annotations

from typing import Callable, Dict, Generic, TypeVar

T = TypeVar("T")


class AssetStore(Generic[T]):
    """Loads assets on demand with a loader function and keeps them for reuse."""

    def __init__(self, loader: Callable[[str], T]) -> None:
        self._loader = loader
        self._assets: Dict[str, T] = {}

    def __contains__(self, filepath: object) -> bool:
        return filepath in self._assets

    def __len__(self) -> int:
        return len(self._assets)

    def load(self, filepath: str) -> None:
        """Load an asset now, replacing any cached copy."""
        self._assets[filepath] = self._loader(filepath)

    def get(self, filepath: str) -> T:
        """Return the cached asset, loading it first if needed."""
        try:
            return self._assets[filepath]
        except KeyError:
            self.load(filepath)
            return self._assets[filepath]

    def remove(self, filepath: str) -> None:
        """Drop an asset from the cache; does nothing if it is absent."""
        self._assets.pop(filepath, None)