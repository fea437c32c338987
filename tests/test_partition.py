import pytest

from ojo_partition.partition import Partition


def _parts(partition):
    return sorted(sorted(part) for part in partition.iter_parts())


def test_partition_scenario():
    partition = Partition()
    for i in range(5):
        partition.insert(i)

    assert len(list(partition.iter_parts())) == 5

    partition.merge(0, 4)
    assert len(list(partition.iter_parts())) == 4
    partition.merge(0, 4)
    assert len(list(partition.iter_parts())) == 4
    assert partition.same_part(0, 4)
    assert sorted(partition.iter_part(0)) == [0, 4]
    assert sorted(partition.iter_part(4)) == [0, 4]

    partition.merge(1, 2)
    assert len(list(partition.iter_parts())) == 3
    assert partition.same_part(1, 2)
    assert sorted(partition.iter_part(1)) == [1, 2]
    assert sorted(partition.iter_part(2)) == [1, 2]

    partition.merge(2, 4)
    assert len(list(partition.iter_parts())) == 2
    for e in (0, 1, 2, 4):
        assert sorted(partition.iter_part(e)) == [0, 1, 2, 4]

    partition.remove_part(1)
    assert len(list(partition.iter_parts())) == 1
    assert sorted(partition.iter_part(3)) == [3]


def test_merge_return_value():
    partition = Partition()
    partition.insert("a")
    partition.insert("b")
    assert partition.merge("a", "b") is True
    assert partition.merge("b", "a") is False


def test_insert_twice_raises():
    partition = Partition()
    partition.insert(7)
    with pytest.raises(ValueError):
        partition.insert(7)


def test_representative_of_missing_raises():
    partition = Partition()
    with pytest.raises(KeyError):
        partition.representative(3)


def test_contains():
    partition = Partition()
    partition.insert(1)
    assert 1 in partition
    assert 2 not in partition


def test_is_rep_after_merge():
    partition = Partition()
    partition.insert(1)
    partition.insert(2)
    partition.merge(1, 2)
    reps = [e for e in (1, 2) if partition.is_rep(e)]
    assert len(reps) == 1
    assert partition.representative(1) == reps[0]
    assert partition.representative(2) == reps[0]


def test_from_parts():
    partition = Partition.from_parts([[1, 2, 3], [4], [], [5, 6]])
    assert _parts(partition) == [[1, 2, 3], [4], [5, 6]]
    assert partition.representative(3) == 1
    assert partition.is_rep(5)
    assert not partition.is_rep(6)
    assert partition.same_part(2, 3)
    assert not partition.same_part(3, 4)


def test_representative_mut_compresses_path():
    partition = Partition()
    for i in range(8):
        partition.insert(i)
    partition.merge(0, 1)
    partition.merge(2, 3)
    partition.merge(0, 2)
    partition.merge(4, 5)
    partition.merge(6, 7)
    partition.merge(4, 6)
    partition.merge(0, 4)
    rep = partition.representative(0)
    for e in range(8):
        assert partition.representative_mut(e) == rep
    assert sorted(partition.iter_part(rep)) == list(range(8))
    assert partition.same_part_mut(1, 7)


def test_remove_part_after_compression_keeps_others():
    partition = Partition()
    for i in range(6):
        partition.insert(i)
    partition.merge(0, 1)
    partition.merge(1, 2)
    partition.merge(3, 4)
    partition.representative_mut(2)
    partition.remove_part(2)
    assert 0 not in partition
    assert 2 not in partition
    assert _parts(partition) == [[3, 4], [5]]
    partition.insert(0)
    assert sorted(partition.iter_part(0)) == [0]