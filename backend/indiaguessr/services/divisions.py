import logging
import random
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Union

from pydantic import TypeAdapter

from ..exceptions import InvalidDivisionName
from ..models.geo import Division, DivisionEntry

logger = logging.getLogger(__name__)

DEFAULT_DIVISIONS_FILE = Path(__file__).resolve().parent.parent / "data" / "indian_states.json"

_ENTRIES_ADAPTER = TypeAdapter(List[DivisionEntry])


class DivisionCatalog:
    """Ordered, read-only set of divisions a game draws from."""

    def __init__(self, divisions: Sequence[Division]):
        if not divisions:
            raise ValueError("A division catalog needs at least one division")

        self._divisions: List[Division] = list(divisions)
        self._by_name: Dict[str, Division] = {}
        for division in self._divisions:
            if division.name in self._by_name:
                raise ValueError(f"Duplicate division name: {division.name!r}")
            self._by_name[division.name] = division

    def __len__(self) -> int:
        return len(self._divisions)

    def __iter__(self) -> Iterator[Division]:
        return iter(self._divisions)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def names(self) -> List[str]:
        """Division names in catalog order."""
        return [division.name for division in self._divisions]

    def get(self, name: str) -> Division:
        try:
            return self._by_name[name]
        except KeyError:
            raise InvalidDivisionName(name) from None

    def first(self) -> Division:
        return self._divisions[0]

    def choose(self, rng: Optional[random.Random] = None) -> Division:
        """Pick one division uniformly at random."""
        return (rng or random).choice(self._divisions)


def load_divisions(path: Optional[Union[str, Path]] = None) -> DivisionCatalog:
    """
    Load a division catalog from a JSON file.

    The file holds an array of {"name", "lat", "lng"} objects. Without a path
    the bundled Indian states are used.

    Args:
        path: Optional path to a divisions file

    Returns:
        DivisionCatalog in file order
    """
    path = Path(path) if path else DEFAULT_DIVISIONS_FILE

    with open(path, encoding="utf-8") as f:
        entries = _ENTRIES_ADAPTER.validate_json(f.read())

    catalog = DivisionCatalog([entry.to_division() for entry in entries])
    logger.info("Loaded %d divisions from %s", len(catalog), path)
    return catalog
