"""Merging of resolution passes into one cumulative mapping."""

from typing import Dict, Mapping, Optional


def update_mapping(
    new_mapping: Optional[Mapping[str, str]],
    cumulative: Dict[str, str]
) -> bool:
    """
    Add all entries of ``new_mapping`` to ``cumulative``.

    Args:
        new_mapping: Result of one resolution pass, None if it was aborted
        cumulative: Mapping updated in place; later values win on collision

    Returns:
        False if ``new_mapping`` is None (``cumulative`` is left untouched),
        True otherwise
    """
    if new_mapping is None:
        return False
    for key, value in new_mapping.items():
        cumulative[key] = value
    return True


class SessionMapping:
    """Cumulative variable mapping kept across resolution passes."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._mapping: Dict[str, str] = dict(initial or {})

    def merge(self, new_mapping: Optional[Mapping[str, str]]) -> bool:
        return update_mapping(new_mapping, self._mapping)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping)

    def __contains__(self, key: object) -> bool:
        return key in self._mapping

    def __getitem__(self, key: str) -> str:
        return self._mapping[key]
