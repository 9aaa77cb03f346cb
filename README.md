# tensormap

A small library for dense multilinear maps (tensors) of floating-point
values, kept in one flat field.

## Installing

```
pip install .
```

## Using it

Everything lives in `tensormap.multilinear`.

```python
from tensormap.multilinear import MMap, mmap_size

grid = MMap([4, 4])          # a 4 x 4 tensor, filled with 0.0
len(grid)                    # 16 elements
grid.dim                     # 2
grid.lens                    # (4, 4)

grid[1, 2] = 7.0             # write by multi-index (tuple or list)
grid[1, 2]                   # 7.0
grid.field_index([1, 2])     # 9: the flat position of that element
grid[9]                      # 7.0: an int indexes the flat field directly
grid.field                   # the flat list of floats

mmap_size([4, 4])            # 152: bytes of the packed layout
grid.nbytes                  # the same, for this map
```

### Indexing

`field_index` takes one index per dimension. The first index runs
fastest: `grid[j, i]` and `grid[j + 1, i]` sit next to each other in the
flat field. Each index is reduced modulo the length of its dimension, so
`grid[5, 2]` is the same element as `grid[1, 2]` in a 4 x 4 map.

Values written through `__setitem__` are stored as `float`.

### Size of the packed layout

`mmap_size(lens)` returns the number of bytes a packed map of that shape
takes: 8 bytes per element, 8 bytes per dimension length and an 8-byte
header.

### Errors

`ValueError` is raised for:

- an empty or `None` list of lengths, or a negative length;
- an empty index list or a negative index in `field_index`;
- indexing along a dimension of length zero.

## What it does not do

`MMap` is storage with indexing and nothing more: there is no
arithmetic between maps, no slicing, no reshaping and no saving to or
loading from files.

## Running the tests

```
pip install .[test]
pytest
```