"""Registration and run-time selection of derived classes by name."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, TextIO

from foamcore.errors import error_exit


@dataclass
class BaseClassData:
    """Documentation hooks of a selectable base class."""

    doc: Callable[[str], str]
    schema: Callable[[str], str]
    entries: Callable[[], list[str]]


@dataclass
class DerivedClassDocumentation:
    """Documentation hooks of a registered derived class."""

    doc: Callable[[], str]
    schema: Callable[[], str]


class BaseClassDocumentation:
    """Global registry of documentation for every selectable base class."""

    _doc_table: ClassVar[dict[str, BaseClassData]] = {}

    @classmethod
    def register_class(cls, name: str, data: BaseClassData) -> None:
        """Register (or replace) the documentation hooks of base class ``name``."""
        cls._doc_table[name] = data

    @classmethod
    def doc(cls, base_class_name: str, derived_class_name: str) -> str:
        """Documentation of a derived class of the named base class."""
        return cls._doc_table[base_class_name].doc(derived_class_name)

    @classmethod
    def schema(cls, base_class_name: str, derived_class_name: str) -> str:
        """Schema of a derived class of the named base class."""
        return cls._doc_table[base_class_name].schema(derived_class_name)

    @classmethod
    def entries(cls, base_class_name: str) -> list[str]:
        """Names of the classes registered under the named base class."""
        return cls._doc_table[base_class_name].entries()

    @classmethod
    def doc_table(cls) -> dict[str, BaseClassData]:
        """The live table of registered base classes."""
        return cls._doc_table


def _defined_by(cls: type, attr: str) -> type | None:
    return next((klass for klass in cls.__mro__ if attr in vars(klass)), None)


class RuntimeSelectionFactory:
    """Mixin turning a direct subclass into a selectable base class.

    A direct subclass is a base: it must define ``name()`` and gets its own
    table of derived classes. Every further subclass is registered in that
    table under its own ``name()`` and must provide ``doc()`` and ``schema()``.
    Pass ``register=False`` in the class statement to skip registration.
    """

    _table: ClassVar[dict[str, Callable[..., Any]]]
    _doc_table: ClassVar[dict[str, DerivedClassDocumentation]]
    _selection_base: ClassVar[type | None] = None

    def __init_subclass__(cls, register: bool = True, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if RuntimeSelectionFactory in cls.__bases__:
            if _defined_by(cls, "name") in (None, RuntimeSelectionFactory):
                raise TypeError(f"selectable base class {cls.__qualname__} must define name()")
            cls._table = {}
            cls._doc_table = {}
            cls._selection_base = cls
            BaseClassDocumentation.register_class(
                cls.name(),
                BaseClassData(doc=cls.doc, schema=cls.schema, entries=cls.entries),
            )
            return
        if not register:
            return
        if "name" not in vars(cls):
            raise TypeError(f"registered class {cls.__qualname__} must define name()")
        for attr in ("doc", "schema"):
            if _defined_by(cls, attr) is RuntimeSelectionFactory:
                raise TypeError(f"registered class {cls.__qualname__} must define {attr}()")
        base = cls._base()
        key = cls.name()
        base._table[key] = cls
        base._doc_table[key] = DerivedClassDocumentation(doc=cls.doc, schema=cls.schema)

    @classmethod
    def _base(cls) -> Any:
        base = cls._selection_base
        if base is None:
            raise TypeError(f"{cls.__qualname__} is not a selectable base class")
        return base

    @classmethod
    def doc(cls, derived_class_name: str) -> str:
        """Documentation of the named derived class."""
        return cls.doc_table()[derived_class_name].doc()

    @classmethod
    def schema(cls, derived_class_name: str) -> str:
        """Schema of the named derived class."""
        return cls.doc_table()[derived_class_name].schema()

    @classmethod
    def entries(cls) -> list[str]:
        """Names of all registered derived classes."""
        return list(cls.table())

    @classmethod
    def create(cls, key: str, *args: Any, **kwargs: Any) -> Any:
        """Construct the derived class registered under ``key``.

        Reports the valid names on standard error and raises KeyError when
        ``key`` is unknown.
        """
        table = cls.table()
        if key not in table:
            msg = f" Could not find constructor for {key}\nvalid constructors are: \n"
            msg += "".join(f" - {name}\n" for name in table)
            error_exit(msg)
            raise KeyError(key)
        return table[key](*args, **kwargs)

    @classmethod
    def print_table(cls, stream: TextIO) -> None:
        """Write the base name, the number of entries and each entry to ``stream``."""
        table = cls.table()
        stream.write(f"{cls._base().name()} {len(table)}\n")
        for name in table:
            stream.write(f" - {name}\n")

    @classmethod
    def size(cls) -> int:
        """Number of registered derived classes."""
        return len(cls.table())

    @classmethod
    def table(cls) -> dict[str, Callable[..., Any]]:
        """The live table mapping names to constructors."""
        return cls._base()._table

    @classmethod
    def doc_table(cls) -> dict[str, DerivedClassDocumentation]:
        """The live table mapping names to documentation hooks."""
        return cls._base()._doc_table