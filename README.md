# iteradapt

A collection of small, lazy iterator adaptors and helpers that go beyond the
standard `itertools` module. Everything works on ordinary Python iterables and
produces ordinary iterators.

## Installation

```
pip install iteradapt
```

To run the test suite:

```
pip install "iteradapt[test]"
pytest
```

## What is inside

| Module | Names |
| --- | --- |
| `iteradapt.peeking` | `put_back_n`, `multipeek`, `peek_nth`, `peeking_take_while` |
| `iteradapt.merge_join` | `merge`, `merge_by`, `merge_join_by` |
| `iteradapt.zip_longest` | `zip_longest`, `Left`, `Right`, `Both` |
| `iteradapt.ziptuple` | `multizip`, `Zip` |
| `iteradapt.zip_eq` | `zip_eq` |
| `iteradapt.unziptuple` | `multiunzip` |
| `iteradapt.tuples` | `tuples`, `tuple_windows`, `circular_tuple_windows` |
| `iteradapt.permutations` | `permutations` |
| `iteradapt.powerset` | `powerset` |
| `iteradapt.unique` | `unique`, `unique_by` |
| `iteradapt.with_position` | `with_position`, `Position` |
| `iteradapt.pad_tail` | `pad_using` |
| `iteradapt.tee` | `tee` |
| `iteradapt.rciter` | `rciter` |
| `iteradapt.process_results` | `process_results` |
| `iteradapt.minmax` | `minmax`, `minmax_by`, `NoElements`, `OneElement`, `MinMax` |
| `iteradapt.repeatn` | `repeat_n` |
| `iteradapt.sources` | `repeat_call`, `unfold`, `iterate` |
| `iteradapt.take_while_inclusive` | `take_while_inclusive` |
| `iteradapt.size_hint` | arithmetic on `(lower, upper)` size estimates |

## Examples

Merge-join two sorted sequences:

```python
from iteradapt.merge_join import merge_join_by

rows = list(merge_join_by([1, 3, 4, 6], [2, 3, 4, 5], lambda l, r: (l > r) - (l < r)))
# Left(1), Right(2), Both(3, 3), Both(4, 4), Right(5), Left(6)
```

Take items while a condition holds, without losing the first item that fails:

```python
from iteradapt.peeking import put_back_n, peeking_take_while

it = put_back_n(range(10))
small = list(peeking_take_while(it, lambda x: x <= 3))   # [0, 1, 2, 3]
next(it)                                                # 4
```

Look several items ahead:

```python
from iteradapt.peeking import peek_nth

it = peek_nth([1, 2, 3])
it.peek_nth(1)   # 2
next(it)         # 1
```

Mark the first and last elements:

```python
from iteradapt.with_position import with_position, Position

for position, item in with_position("abc"):
    ...
```

Sliding windows and fixed-size groups:

```python
from iteradapt.tuples import tuples, tuple_windows, circular_tuple_windows

list(tuple_windows([1, 2, 3, 4], 2))           # [(1, 2), (2, 3), (3, 4)]
list(circular_tuple_windows([1, 2, 3], 2))     # [(1, 2), (2, 3), (3, 1)]
list(tuples(range(5), 3))                      # [(0, 1, 2)]
```

Lift a function over an iterable of results, stopping at the first error:

```python
from iteradapt.process_results import process_results
```

Minimum and maximum in one pass:

```python
from iteradapt.minmax import minmax

minmax([3, 1, 2]).into_option()   # (1, 3)
```

Permutations that read the input lazily:

```python
from iteradapt.permutations import permutations

list(permutations(range(3), 2))
```