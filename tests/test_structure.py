import pytest

from wyvern.blocks.block_components import BlockComponents
from wyvern.blocks.properties import Axis
from wyvern.blocks.state import BlockState
from wyvern.blocks.structure import Structure, StructureBlock, split_structure
from wyvern.errors import IndexOutOfBounds


class RecordingDimension:
    def __init__(self):
        self.calls = []

    def set_block(self, position, state):
        self.calls.append((position, state))


def make_structure():
    log = BlockState("minecraft:oak_log").with_component(BlockComponents.AXIS, Axis.Y)
    return Structure(
        size=(2, 3, 4),
        blocks=[StructureBlock((0, 0, 0), 0), StructureBlock((1, 2, 3), 1)],
        palette=[BlockState("minecraft:stone"), log],
        data_version=4325,
    )


def test_round_trip():
    structure = make_structure()
    assert Structure.from_dict(structure.to_dict()) == structure


def test_to_dict_keys():
    data = make_structure().to_dict()
    assert set(data) == {"size", "blocks", "palette", "DataVersion"}
    assert data["palette"][1] == {"Name": "minecraft:oak_log", "Properties": {"axis": "y"}}


def test_from_dict_missing_key():
    data = make_structure().to_dict()
    del data["DataVersion"]
    with pytest.raises(ValueError):
        Structure.from_dict(data)


def test_from_dict_bad_size():
    data = make_structure().to_dict()
    data["size"] = [1, 2]
    with pytest.raises(ValueError):
        Structure.from_dict(data)


def test_place_at_origin():
    structure = make_structure()
    dimension = RecordingDimension()
    structure.place(dimension, (0, 0, 0))
    assert [pos for pos, _ in dimension.calls] == [b.pos for b in structure.blocks]
    assert [state for _, state in dimension.calls] == structure.palette


def test_place_offsets_by_base():
    structure = make_structure()
    dimension = RecordingDimension()
    base = (10, -20, 30)
    structure.place(dimension, base)
    relative = [tuple(p - b for p, b in zip(pos, base)) for pos, _ in dimension.calls]
    assert relative == [b.pos for b in structure.blocks]


def test_place_bad_palette_index():
    structure = Structure((1, 1, 1), [StructureBlock((0, 0, 0), 5)], [BlockState.air()])
    with pytest.raises(IndexOutOfBounds):
        structure.place(RecordingDimension(), (0, 0, 0))


def test_split_structure_keys_and_contents():
    blocks = [
        StructureBlock((0, 0, 0), 0),
        StructureBlock((15, 0, 0), 0),
        StructureBlock((16, 0, 0), 1),
        StructureBlock((-1, 0, 0), 1),
    ]
    structure = Structure((32, 1, 1), blocks, [BlockState("minecraft:stone"), BlockState.air()], 7)
    pieces = split_structure(structure, (16, 16, 16))
    assert set(pieces) == {(0, 0, 0), (1, 0, 0), (-1, 0, 0)}
    assert sorted(len(p.blocks) for p in pieces.values()) == [1, 1, 2]
    assert all(p.size == (16, 16, 16) for p in pieces.values())
    assert all(p.palette == structure.palette for p in pieces.values())
    assert all(p.data_version == 0 for p in pieces.values())
    assert sorted(b.pos for p in pieces.values() for b in p.blocks) == sorted(b.pos for b in blocks)


def test_split_structure_rejects_zero_size():
    with pytest.raises(ValueError):
        split_structure(make_structure(), (0, 16, 16))