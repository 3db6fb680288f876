"""Group/subgroup index: stable first-seen ordinals for emoji-test markers."""

import logging
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class GroupRecord:
    id: int
    name: str

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class SubgroupRecord:
    id: int
    name: str
    group_id: int

    def to_dict(self) -> Dict:
        return {"id": self.id, "name": self.name, "group": self.group_id}


class GroupIndex:
    """Assigns ordinals to group and subgroup names in the order first seen.

    Subgroup ids are global (not per group). A subgroup is owned by the
    group it was first interned under.
    """

    def __init__(self):
        self.groups: List[GroupRecord] = []
        self.subgroups: List[SubgroupRecord] = []
        self._group_ids: Dict[str, int] = {}
        self._subgroup_ids: Dict[str, int] = {}

    def intern_group(self, name: str) -> int:
        gid = self._group_ids.get(name)
        if gid is None:
            gid = len(self.groups)
            self.groups.append(GroupRecord(gid, name))
            self._group_ids[name] = gid
        return gid

    def intern_subgroup(self, group_name: str, name: str) -> int:
        gid = self.intern_group(group_name)
        sid = self._subgroup_ids.get(name)
        if sid is None:
            sid = len(self.subgroups)
            self.subgroups.append(SubgroupRecord(sid, name, gid))
            self._subgroup_ids[name] = sid
        elif self.subgroups[sid].group_id != gid:
            logger.warning(
                "Subgroup %r seen under %r but belongs to %r; keeping first owner",
                name, group_name, self.groups[self.subgroups[sid].group_id].name,
            )
        return sid

    def group_id(self, name: str) -> Optional[int]:
        return self._group_ids.get(name)

    def subgroup_id(self, name: str) -> Optional[int]:
        return self._subgroup_ids.get(name)

    def group_names(self) -> List[str]:
        return [g.name for g in self.groups]

    def hierarchy(self) -> Dict[str, List[str]]:
        """Group name -> its subgroup names, both in first-seen order."""
        out: Dict[str, List[str]] = {g.name: [] for g in self.groups}
        for sg in self.subgroups:
            out[self.groups[sg.group_id].name].append(sg.name)
        return out

    def __len__(self) -> int:
        return len(self.groups)
