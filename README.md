# foamcore

Core building blocks for finite-volume field computations, in pure Python
with no third-party dependencies.

## Modules

- `foamcore.primitives`: `Vector`, a mutable three-component vector with
  `+`, `-`, scalar `*` (on either side), in-place `+=`, `-=`, `*=`, the
  component-wise product `&`, indexing and iteration. `mag(vec)` returns its
  Euclidean length. Also provides the constant `ROOTVSMALL` and the aliases
  `label`, `local_idx`, `global_idx` and `scalar`.
- `foamcore.executors`: `SerialExecutor`, `CPUExecutor` and `GPUExecutor`,
  all subclasses of `Executor`. Two executors are equal when they are of the
  same class. `describe()` returns the name of the execution space
  (`"Serial"`, `"Host"` or `"Device"`).
- `foamcore.field`: `Field`, a sized sequence of values bound to an executor.
  It can be built from a size (elements start at `0.0`, or at copies of
  `fill_value`), from another field, or from any iterable. It supports
  indexing, iteration, `+`, `-`, `*` (by another field or by a number),
  `+=`, `-=`, `assign()`, `apply()`, `resize()`, `size()`, `empty()`,
  `range()`, `data()`, `copy_to_executor()` and `copy_to_host()`.
  `span()` returns a `FieldSpan`, a live view of the whole field or of a
  half-open `(start, stop)` range. `LabelField`, `ScalarField` and
  `VectorField` are typed aliases of `Field`.
- `foamcore.operations`: free functions over fields: `map_field`, `fill`,
  `set_field`, `scalar_mul`, `add`, `sub`, `mul` (all in place), `spans`,
  `copy_to_hosts`, `equal` (against another field, a sequence or a single
  value) and `sum_field`.
- `foamcore.parallel`: `parallel_for` and `parallel_reduce` over a half-open
  index range on an executor, and `parallel_for_field` and
  `parallel_reduce_field` over the indices of a field. Reductions return the
  folded value.
- `foamcore.boundary_fields`: `BoundaryFields`, holding per-face `value`,
  `ref_value`, `value_fraction` and `ref_grad` fields, per-boundary
  `boundary_types`, and `offset` (one start index per boundary plus the end of
  the last). `range(patch_id)` returns a boundary's face index range;
  `copy_to(exec)` makes an independent copy on another executor.
- `foamcore.domain_field`: `DomainField`, internal cell values
  (`internal_field`) together with a `BoundaryFields` (`boundary_field`).
  Build it from given fields or with `DomainField.from_sizes(...)`; `assign()`
  and `copy()` copy contents.
- `foamcore.dictionary`: `Dictionary`, a string-keyed store of values of any
  type with `insert`, `remove`, `contains`, `keys`, `items`, type-checked
  `get(key, value_type)`, and nested dictionaries via `is_dict` and
  `sub_dict`.
- `foamcore.token_list`: `TokenList`, an ordered list of tokens of any type
  with `insert`, `remove`, `empty`, `tokens` and type-checked
  `get(index, value_type)`.
- `foamcore.inputs`: `read(data_class, input_value)` builds an object by
  calling `data_class.read(...)` with a `Dictionary` or a `TokenList`.
- `foamcore.runtime_selection`: `RuntimeSelectionFactory`, a mixin for
  registering derived classes by name and creating them at run time, with
  documentation and schema lookup; `BaseClassDocumentation` is the global
  registry of selectable base classes.
- `foamcore.errors`: `NeoFOAMException`, `check`, `check_equal`,
  `error_message`, `error_exit`, `info`, `debug_info` and `debug_enabled`.
  Debug output is switched on by setting the environment variable `NF_DEBUG`
  or `NF_DEBUG_INFO`.
- `foamcore.time`: `ArgList` and `Time`, a loop controller whose `loop()`
  advances by one and returns true for times 1 through 10.

## Installation

```
pip install .
```

## Examples

Fields and operations:

```python
from foamcore.executors import SerialExecutor
from foamcore.field import Field
from foamcore.operations import fill, sum_field

exec_ = SerialExecutor()
a = Field(exec_, [1.0, 2.0, 3.0])
b = Field(exec_, 3)
fill(b, 2.0)

c = a + b
print(list(c))        # [3.0, 4.0, 5.0]
print(sum_field(c))   # 12.0
```

Vectors:

```python
from foamcore.primitives import Vector, mag

v = Vector(3.0, 4.0, 0.0)
print(mag(v))          # 5.0
print(list(2.0 * v))   # [6.0, 8.0, 0.0]
```

Dictionaries:

```python
from foamcore.dictionary import Dictionary

d = Dictionary({"a": 1, "sub": Dictionary({"b": 2.0})})
print(d.get("a", int))                  # 1
print(d.sub_dict("sub").get("b", float))  # 2.0
d.get("a", str)                         # raises TypeError
```

Runtime selection. A direct subclass of `RuntimeSelectionFactory` is a
selectable base and must define `name()`; each further subclass is registered
under its own `name()` and must define `doc()` and `schema()`:

```python
from foamcore.runtime_selection import RuntimeSelectionFactory


class Scheme(RuntimeSelectionFactory):
    @classmethod
    def name(cls):
        return "Scheme"

    def __init__(self, factor):
        self.factor = factor


class Linear(Scheme):
    @classmethod
    def name(cls):
        return "linear"

    @classmethod
    def doc(cls):
        return "Linear interpolation"

    @classmethod
    def schema(cls):
        return "{}"


scheme = Scheme.create("linear", 2.0)   # a Linear instance
print(Scheme.entries())                 # ['linear']
print(Scheme.doc("linear"))             # Linear interpolation
```

An unknown name passed to `create` lists the valid names on standard error
and raises `KeyError`.

## What it does not do

- All executors run their work serially in the current Python process; the
  executor only records where a field is meant to live.
- There is no mesh type, no reading of case files and no solver; the time
  loop is a fixed counter.
- There is no distributed or multi-process communication.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```