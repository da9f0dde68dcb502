import pytest

from webmcp.errors import ValidationError
from webmcp.schema import validate_batch, validate_context, validate_descriptor
from webmcp.tools import ToolDescriptor, make_tool, text_result
from tests.conftest import make_descriptor


def test_mapping_descriptor_is_normalised():
    handler = lambda params, context: params
    tool = validate_descriptor(make_descriptor("echo", handler))

    assert isinstance(tool, ToolDescriptor)
    assert tool.name == "echo"
    assert tool.handler is handler
    assert tool.input_schema == {"type": "object", "properties": {}}


def test_snake_case_keys_are_accepted():
    tool = validate_descriptor(
        {
            "name": "t",
            "description": "d",
            "input_schema": {},
            "handler": lambda params, context: None,
        }
    )
    assert tool.input_schema == {}


@pytest.mark.parametrize(
    "descriptor, kind",
    [
        (None, "descriptor"),
        ("echo", "descriptor"),
        (make_descriptor("x", name=""), "name"),
        (make_descriptor("x", name=42), "name"),
        (make_descriptor("x", description=""), "description"),
        (make_descriptor("x", description=None), "description"),
        (make_descriptor("x", inputSchema=None), "input_schema"),
        (make_descriptor("x", inputSchema="object"), "input_schema"),
        (make_descriptor("x", execute="not callable"), "handler"),
    ],
)
def test_each_check_has_its_own_kind(descriptor, kind):
    with pytest.raises(ValidationError) as excinfo:
        validate_descriptor(descriptor)
    assert excinfo.value.kind == kind


def test_checks_run_in_order():
    # Everything is wrong; the name check comes first.
    bad = {"name": "", "description": "", "inputSchema": None, "execute": None}
    with pytest.raises(ValidationError) as excinfo:
        validate_descriptor(bad)
    assert excinfo.value.kind == "name"


def test_validation_error_is_a_type_error():
    with pytest.raises(TypeError):
        validate_descriptor(None)


def test_schema_contents_are_not_enforced():
    schema = {"type": "object", "required": ["never-checked"]}
    tool = validate_descriptor(make_descriptor("loose", inputSchema=schema))
    assert tool.input_schema is schema


def test_batch_fails_on_first_invalid_entry():
    with pytest.raises(ValidationError) as excinfo:
        validate_batch([make_descriptor("a"), make_descriptor("b", execute=None), make_descriptor("c", name="")])
    assert excinfo.value.kind == "handler"
    assert excinfo.value.tool_name == "b"


def test_validate_context_shape():
    with pytest.raises(ValidationError) as excinfo:
        validate_context(None)
    assert excinfo.value.kind == "context"

    with pytest.raises(ValidationError) as excinfo:
        validate_context({"tools": "echo"})
    assert excinfo.value.kind == "tools"

    assert validate_context({"tools": ()}) == []


def test_make_tool_only_yields_valid_descriptors():
    tool = make_tool("ping", "replies pong", lambda params, context: "pong")
    assert tool.input_schema == {"type": "object", "properties": {}}

    with pytest.raises(ValidationError):
        make_tool("ping", "", lambda params, context: "pong")


def test_public_view_hides_handler():
    tool = make_tool("ping", "replies pong", lambda params, context: "pong")
    assert tool.public_view() == {
        "name": "ping",
        "description": "replies pong",
        "inputSchema": {"type": "object", "properties": {}},
    }


def test_text_result_shape():
    assert text_result("hi") == {"content": [{"type": "text", "text": "hi"}]}
