import io

import pytest

from foamcore.runtime_selection import (
    BaseClassData,
    BaseClassDocumentation,
    RuntimeSelectionFactory,
)


class Shape(RuntimeSelectionFactory):
    def __init__(self, size):
        self.size = size

    @classmethod
    def name(cls):
        return "ShapeBase"


class Square(Shape):
    @classmethod
    def name(cls):
        return "square"

    @classmethod
    def doc(cls):
        return "a square"

    @classmethod
    def schema(cls):
        return "square schema"


class Circle(Shape):
    @classmethod
    def name(cls):
        return "circle"

    @classmethod
    def doc(cls):
        return "a circle"

    @classmethod
    def schema(cls):
        return "circle schema"


class Abstract(Shape, register=False):
    pass


class Solver(RuntimeSelectionFactory):
    @classmethod
    def name(cls):
        return "SolverBase"


class Jacobi(Solver):
    @classmethod
    def name(cls):
        return "jacobi"

    @classmethod
    def doc(cls):
        return "jacobi doc"

    @classmethod
    def schema(cls):
        return "jacobi schema"


def test_create_builds_registered_class():
    obj = Shape.create("square", 3)
    assert isinstance(obj, Square)
    assert obj.size == 3
    assert BaseClassDocumentation.doc("ShapeBase", obj.name()) == "a square"


def test_create_passes_keyword_arguments():
    obj = Shape.create("circle", size=7)
    assert isinstance(obj, Circle)
    assert obj.size == 7
    assert BaseClassDocumentation.schema("ShapeBase", obj.name()) == "circle schema"


def test_entries_and_size():
    assert sorted(Shape.entries()) == ["circle", "square"]
    assert Shape.size() == len(Shape.entries())
    assert sorted(BaseClassDocumentation.entries("ShapeBase")) == ["circle", "square"]


def test_unregistered_subclass_is_not_listed():
    assert "Abstract" not in Shape.entries()
    assert Abstract not in Shape.table().values()
    assert "Abstract" not in BaseClassDocumentation.entries("ShapeBase")


def test_doc_and_schema_from_factory():
    assert Shape.doc("square") == "a square"
    assert Shape.schema("circle") == "circle schema"
    assert BaseClassDocumentation.doc("ShapeBase", "square") == Shape.doc("square")


def test_doc_and_schema_from_base_documentation():
    assert BaseClassDocumentation.doc("ShapeBase", "circle") == "a circle"
    assert BaseClassDocumentation.schema("ShapeBase", "square") == "square schema"
    assert sorted(BaseClassDocumentation.entries("ShapeBase")) == ["circle", "square"]


def test_unknown_derived_doc_raises():
    with pytest.raises(KeyError):
        Shape.doc("triangle")
    with pytest.raises(KeyError):
        BaseClassDocumentation.doc("ShapeBase", "triangle")


def test_unknown_base_documentation_raises():
    with pytest.raises(KeyError):
        BaseClassDocumentation.entries("NoSuchBase")


def test_create_unknown_key_reports_and_raises(capsys):
    with pytest.raises(KeyError):
        Shape.create("triangle", 1)
    err = capsys.readouterr().err
    assert "Could not find constructor for triangle" in err
    assert " - square\n" in err
    assert " - circle\n" in err
    listed = [name for name in BaseClassDocumentation.entries("ShapeBase") if f" - {name}\n" in err]
    assert sorted(listed) == ["circle", "square"]


def test_separate_bases_have_separate_tables():
    assert Solver.entries() == ["jacobi"]
    assert "jacobi" not in Shape.entries()
    assert Shape.create("square", 2).size == 2
    assert BaseClassDocumentation.entries("SolverBase") == ["jacobi"]
    with pytest.raises(KeyError):
        Solver.create("square")


def test_print_table():
    out = io.StringIO()
    Solver.print_table(out)
    assert out.getvalue() == "SolverBase 1\n - jacobi\n"
    assert BaseClassDocumentation.entries("SolverBase") == ["jacobi"]


def test_derived_without_name_is_rejected():
    with pytest.raises(TypeError):

        class NoName(Solver):
            @classmethod
            def doc(cls):
                return "d"

            @classmethod
            def schema(cls):
                return "s"

    assert Solver.entries() == ["jacobi"]
    assert BaseClassDocumentation.entries("SolverBase") == ["jacobi"]


def test_derived_without_doc_is_rejected():
    with pytest.raises(TypeError):

        class NoDoc(Solver):
            @classmethod
            def name(cls):
                return "nodoc"

            @classmethod
            def schema(cls):
                return "s"

    assert "nodoc" not in Solver.entries()
    assert "nodoc" not in BaseClassDocumentation.entries("SolverBase")


def test_base_without_name_is_rejected():
    with pytest.raises(TypeError):

        class Nameless(RuntimeSelectionFactory):
            pass

    with pytest.raises(KeyError):
        BaseClassDocumentation.entries("Nameless")


def test_factory_itself_has_no_table():
    with pytest.raises(TypeError):
        RuntimeSelectionFactory.table()


def test_manual_registration():
    data = BaseClassData(
        doc=lambda derived: "doc of " + derived,
        schema=lambda derived: "schema of " + derived,
        entries=lambda: ["x", "y"],
    )
    BaseClassDocumentation.register_class("ManualBase", data)
    assert BaseClassDocumentation.doc("ManualBase", "x") == "doc of x"
    assert BaseClassDocumentation.schema("ManualBase", "y") == "schema of y"
    assert BaseClassDocumentation.entries("ManualBase") == ["x", "y"]
    assert BaseClassDocumentation.doc_table()["ManualBase"] is data