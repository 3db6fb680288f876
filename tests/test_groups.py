from unigen.emoji.groups import GroupIndex


def test_first_seen_ordinals():
    index = GroupIndex()
    assert index.intern_group("Smileys & Emotion") == 0
    assert index.intern_group("People & Body") == 1
    assert index.intern_group("Smileys & Emotion") == 0
    assert len(index) == 2


def test_subgroup_ids_are_global():
    index = GroupIndex()
    assert index.intern_subgroup("Smileys & Emotion", "face-smiling") == 0
    assert index.intern_subgroup("Smileys & Emotion", "face-affection") == 1
    assert index.intern_subgroup("People & Body", "hand-fingers-open") == 2
    assert index.intern_subgroup("Smileys & Emotion", "face-smiling") == 0
    assert index.subgroups[2].group_id == 1


def test_subgroup_keeps_first_owner():
    index = GroupIndex()
    index.intern_subgroup("A", "shared")
    assert index.intern_subgroup("B", "shared") == 0
    assert index.subgroups[0].group_id == index.group_id("A")
    assert index.hierarchy() == {"A": ["shared"], "B": []}


def test_serialization():
    index = GroupIndex()
    index.intern_subgroup("Flags", "flag")
    assert index.groups[0].to_dict() == {"id": 0, "name": "Flags"}
    assert index.subgroups[0].to_dict() == {"id": 0, "name": "flag", "group": 0}
