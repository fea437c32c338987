# ojo_partition

A disjoint-sets (union-find) structure. It merges elements into parts by
union by rank. It also records the children of each element, so you can
list the members of a part, list every part, and remove a whole part.

Elements must be hashable. `iter_parts` yields the parts in the order of
their representatives when the elements can be compared with each other.
Otherwise it yields them in the order the representatives were inserted.

## Installation

```
pip install .
```

## Usage

```python
from ojo_partition.partition import Partition

p = Partition()
for i in range(5):
    p.insert(i)

p.merge(0, 4)        # True: 0 and 4 were in different parts
p.merge(0, 4)        # False: they are already in the same part
p.same_part(0, 4)    # True
sorted(p.iter_part(4))            # [0, 4]
len(list(p.iter_parts()))         # 4

p.remove_part(0)     # removes 0 and 4
0 in p               # False
```

Errors:

- `insert` raises `ValueError` if the element is already present.
- `representative` raises `KeyError` if the element is not in the partition.
  So do the methods that call it: `same_part`, `iter_part`, `merge` and
  `remove_part`.

`is_rep(elt)` tells whether an element is the representative of its part.

### Building from known parts

```python
p = Partition.from_parts([[1, 2, 3], [4], [5, 6]])
p.representative(3)  # 1: the first element of each part is its representative
```

Empty parts are skipped.

### Path compression

`representative` and `same_part` leave the structure unchanged.
`representative_mut` and `same_part_mut` also attach the queried element
directly to its representative. This makes later lookups shorter.

## Running the tests

```
pip install ".[test]"
pytest
```