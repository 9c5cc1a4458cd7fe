# acl

A pure-Python library of algorithms and data structures for competitive
programming and algorithm work. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Contents

| Module | Provides |
| --- | --- |
| `acl.internal_math` | `safe_mod`, `is_prime`, `inv_gcd`, `primitive_root`, `ceil_pow2`, `bsf`, `Barrett` |
| `acl.number_theory` | `pow_mod`, `inv_mod`, `crt`, `floor_sum` |
| `acl.dsu` | `DSU`: disjoint set union |
| `acl.convolution` | `convolution`, `convolution_ll` |
| `acl.segtree` | `SegTree` |
| `acl.lazysegtree` | `LazySegTree` |
| `acl.internal_scc` | `SCCGraph` without bounds checks, with `scc_ids` |
| `acl.scc` | `SCCGraph`: strongly connected components |
| `acl.twosat` | `TwoSAT` |
| `acl.maxflow` | `MFGraph`, `MFEdge` |
| `acl.mincostflow` | `MCFGraph`, `MCFEdge` |
| `acl.strings` | `suffix_array`, `lcp_array`, `z_algorithm`, `sa_is`, `sa_naive`, `sa_doubling` |

## Examples

### Disjoint set union

```python
from acl.dsu import DSU

d = DSU(4)
d.merge(0, 1)
d.merge(2, 3)
d.same(0, 1)   # True
d.size(2)      # 2
d.groups()     # [[0, 1], [2, 3]]
```

### Number theory

```python
from acl.number_theory import pow_mod, inv_mod, crt, floor_sum

pow_mod(2, 10, 1000)        # 24
inv_mod(3, 7)               # 5
crt([2, 3], [3, 5])         # (8, 15)
floor_sum(4, 10, 6, 3)      # 3
```

`crt` returns `(0, 0)` when the system has no solution.

### Convolution

```python
from acl.convolution import convolution, convolution_ll

convolution([1, 2, 3], [4, 5], 998244353)   # [4, 13, 22, 15]
convolution_ll([-1, 2], [3, -4])            # [-3, 10, -8]
```

`convolution` defaults to the modulus 998244353. `convolution_ll` is exact
while every result fits in a signed 64-bit integer.

### Segment trees

```python
from acl.segtree import SegTree

st = SegTree(max, lambda: float("-inf"), [1, 5, 2, 4])
st.prod(0, 3)          # 5
st.set(2, 9)
st.all_prod()          # 9
st.max_right(0, lambda v: v < 5)   # 1
```

```python
from acl.lazysegtree import LazySegTree

# range add, range min
lst = LazySegTree(
    min, lambda: float("inf"),
    lambda f, x: f + x, lambda f, g: f + g, lambda: 0,
    [5, 3, 7, 1],
)
lst.apply_range(0, 2, 10)
lst.prod(0, 4)         # 1
lst.get(1)             # 13
```

### Strongly connected components and 2-SAT

```python
from acl.scc import SCCGraph

g = SCCGraph(3)
g.add_edge(0, 1)
g.add_edge(1, 0)
g.add_edge(1, 2)
g.scc()                # [[0, 1], [2]]
```

Components come in topological order, each sorted ascending.

```python
from acl.twosat import TwoSAT

ts = TwoSAT(2)
ts.add_clause(0, True, 1, True)     # x0 or x1
ts.add_clause(0, False, 0, False)   # not x0
ts.satisfiable()                    # True
ts.answer()                         # [False, True]
```

### Flows

```python
from acl.maxflow import MFGraph

g = MFGraph(4)
g.add_edge(0, 1, 2)
g.add_edge(0, 2, 1)
g.add_edge(1, 3, 1)
g.add_edge(2, 3, 2)
g.flow(0, 3)           # 2
g.min_cut(0)           # [True, True, False, False]
```

```python
from acl.mincostflow import MCFGraph

g = MCFGraph(3)
g.add_edge(0, 1, 2, 1)
g.add_edge(1, 2, 2, 1)
g.add_edge(0, 2, 1, 5)
g.flow(0, 2)           # (3, 9)
g.slope(0, 2)          # [(0, 0), (2, 4), (3, 9)]
```

Without `flow_limit`, both flow classes push as much as the source's outgoing
capacity allows.

### Strings

```python
from acl.strings import suffix_array, lcp_array, z_algorithm

sa = suffix_array("abracadabra")
lcp_array("abracadabra", sa)
z_algorithm("aaabaaaab")    # [9, 2, 1, 0, 3, 4, 2, 1, 0]
```

`suffix_array` accepts strings, bytes, or any sequence of comparable items;
pass `upper` to give a sequence of integers in `[0, upper]` directly.

## Errors

Out-of-range arguments and violated preconditions raise `ValueError` or
`IndexError` rather than producing undefined results.

## What is not included

- There is no modular integer type. Modular arithmetic is available through
  `pow_mod` and `inv_mod`, and `convolution` takes the modulus as an argument.
- There is no Fenwick tree. For prefix sums with point updates, use
  `SegTree(operator.add, lambda: 0, values)`.