"""Schema composition and startup validation."""

import pytest

from graph.errors import SchemaError
from graph.resolvers import resolve_list
from graph.schema import build_schema, schema
from graph.types import ITEM_TYPE, Argument, Field, ListType, ObjectType, RootType, Schema, validate_schema


def _schema_with(field):
    return Schema(
        query=RootType(name="Query", fields={field.name: field}),
        mutation=RootType(name="Mutation"),
    )


def test_roots_expose_expected_fields():
    assert set(schema.query.fields) == {"item", "list"}
    assert set(schema.mutation.fields) == {"create", "update", "delete"}
    assert schema.root_for("query") is schema.query
    assert schema.root_for("mutation") is schema.mutation
    assert schema.root_for("subscription") is None


def test_argument_contracts():
    create = schema.mutation.fields["create"]
    assert [(a.name, a.type, a.required) for a in create.args] == [
        ("name", "String", True),
        ("description", "String", False),
        ("quality", "String", False),
    ]
    update = schema.mutation.fields["update"]
    assert update.argument("id").required
    assert not update.argument("quality").required
    assert schema.query.fields["item"].argument("id").lenient
    assert schema.query.fields["list"].args == ()


def test_item_type_shape():
    assert dict(ITEM_TYPE.fields) == {
        "id": "Int",
        "name": "String",
        "description": "String",
        "quality": "String",
    }
    assert isinstance(schema.query.fields["list"].type, ListType)


def test_build_schema_is_valid():
    assert build_schema() == schema


def test_unknown_scalar_on_object_type():
    bad = ObjectType(name="Bad", fields={"weight": "Float"})
    with pytest.raises(SchemaError, match="unknown scalar type Float"):
        validate_schema(_schema_with(Field(name="bad", type=bad, resolver=resolve_list)))


def test_duplicate_argument():
    fld = Field(
        name="bad",
        type=ITEM_TYPE,
        resolver=resolve_list,
        args=(Argument("id", "Int"), Argument("id", "Int")),
    )
    with pytest.raises(SchemaError, match="more than once"):
        validate_schema(_schema_with(fld))


def test_field_without_resolver():
    with pytest.raises(SchemaError, match="has no resolver"):
        validate_schema(_schema_with(Field(name="bad", type=ITEM_TYPE, resolver=None)))


def test_required_lenient_argument():
    fld = Field(
        name="bad",
        type=ITEM_TYPE,
        resolver=resolve_list,
        args=(Argument("id", "Int", required=True, lenient=True),),
    )
    with pytest.raises(SchemaError, match="both required and lenient"):
        validate_schema(_schema_with(fld))
