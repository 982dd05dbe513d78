import pytest

from sbrcs.bounds import BoundBox
from sbrcs.bvh import BranchData, NodeStatus, ReducedBvhArray, ReducedBvhNode
from sbrcs.triangle import Triangle
from sbrcs.vector import Vec3

BOX = BoundBox(Vec3(-1.0, -2.0, -0.5), Vec3(1.0, 2.0, 0.5))
TRIG = Triangle(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.25), Vec3(0.0, -1.5, 0.0))


def _sample():
    return ReducedBvhArray(
        [
            ReducedBvhNode.branch(NodeStatus.ROOT, 0, 1, 2, BOX),
            ReducedBvhNode.leaf(TRIG),
            ReducedBvhNode.leaf(Triangle(TRIG.v3, TRIG.v2, TRIG.v1)),
        ]
    )


def test_leaf_constructor():
    node = ReducedBvhNode.leaf(TRIG)
    assert node.status is NodeStatus.LEAF
    assert node.trig == TRIG
    assert node.data is None


def test_branch_constructor():
    node = ReducedBvhNode.branch(NodeStatus.BRANCH, 3, 4, 5, BOX)
    assert node.status is NodeStatus.BRANCH
    assert node.data == BranchData(BOX, 3, 4, 5)
    assert node.trig is None


def test_leaf_without_triangle_is_rejected():
    with pytest.raises(ValueError):
        ReducedBvhNode(NodeStatus.LEAF)


def test_round_trip_bytes():
    array = _sample()
    assert ReducedBvhArray.from_bytes(array.to_bytes()) == array


def test_wire_layout():
    raw = _sample().to_bytes()
    assert raw[:4] == b"\x03\x00\x00\x00"
    assert raw[4:8] == b"\x08\x00\x00\x00"
    assert len(raw) == 4 + 40 * 3


def test_len():
    assert len(_sample()) == 3
    assert len(ReducedBvhArray()) == 0


def test_save_and_load(tmp_path):
    path = tmp_path / "model.rba"
    array = _sample()
    array.save(path)
    assert ReducedBvhArray.load(path) == array


def test_truncated_data_is_rejected():
    raw = _sample().to_bytes()
    with pytest.raises(ValueError):
        ReducedBvhArray.from_bytes(raw[:-1])
    with pytest.raises(ValueError):
        ReducedBvhArray.from_bytes(b"\x01")


def test_unknown_status_is_rejected():
    raw = bytearray(_sample().to_bytes())
    raw[4] = 3
    with pytest.raises(ValueError):
        ReducedBvhArray.from_bytes(bytes(raw))


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ReducedBvhArray.load(tmp_path / "absent.rba")