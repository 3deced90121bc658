"""
Loaders provide contract source for a location.

Any object with a `load(location) -> bytes | str` method can be used by
Deployments. A loader signals failure by raising; Deployments wraps the
failure into a LoadError.
"""

from pathlib import Path
from typing import Dict, Protocol, Union


Source = Union[bytes, str]


class Loader(Protocol):
    def load(self, location: str) -> Source:
        ...


class FileLoader:
    """Loads contract files relative to a base directory."""

    def __init__(self, base_dir: str = '.'):
        self.base_dir = Path(base_dir)

    def load(self, location: str) -> bytes:
        return (self.base_dir / location).read_bytes()


class MemoryLoader:
    """
    Serves sources that were fetched ahead of time.

    Useful when sources are fetched concurrently by the caller and then
    added to a Deployments registry one by one.
    """

    def __init__(self, sources: Dict[str, Source]):
        self.sources = dict(sources)

    def load(self, location: str) -> Source:
        if location not in self.sources:
            raise FileNotFoundError(f"no source for {location}")
        return self.sources[location]
