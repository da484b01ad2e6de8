from typing import Dict, Optional

from yuml2dot.compiler.labels import record_name


class UidRegistry:
    """
    Maps record names to short sequential node IDs (A0, A1, ...).

    One instance per compilation pass. IDs are handed out in first-seen
    order and never reassigned.
    """

    def __init__(self, prefix: str = "A"):
        self._prefix = prefix
        self._counter = 0
        self._uids: Dict[str, str] = {}

    def create_uid(self, label: str) -> Optional[str]:
        """Register ``label`` and return its new ID, or None if already seen."""
        name = record_name(label)
        if name in self._uids:
            return None

        uid = f"{self._prefix}{self._counter}"
        self._counter += 1
        self._uids[name] = uid
        return uid

    def get_uid(self, label: str) -> Optional[str]:
        return self._uids.get(record_name(label))

    def __contains__(self, label: str) -> bool:
        return record_name(label) in self._uids

    def __len__(self) -> int:
        return len(self._uids)
