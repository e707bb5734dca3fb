import pytest
from pydantic import ValidationError

from api_snippet_gen.parser.base import ModifierKind, PathSegment, RequestDescriptor, SegmentKind


class TestPathSegment:
    def test_short_type_name_uses_last_component(self):
        seg = PathSegment(identifier="messages", kind=SegmentKind.NAVIGATION_PROPERTY, type_name="microsoft.graph.message")
        assert seg.short_type_name == "message"

    def test_short_type_name_falls_back_to_identifier(self):
        seg = PathSegment(identifier="users")
        assert seg.short_type_name == "users"
        assert seg.kind is SegmentKind.OTHER

    def test_operation_flag(self):
        assert PathSegment(identifier="sendMail", kind="operation").is_operation
        assert not PathSegment(identifier="users", kind="entity_set").is_operation


class TestRequestDescriptor:
    def test_create_minimal_descriptor(self):
        desc = RequestDescriptor(method="get", path="/me")
        assert desc.method == "GET"
        assert desc.api_version == "v1.0"
        assert desc.modifiers == {}
        assert desc.has_body is False
        assert desc.last_segment is None

    def test_modifier_keys_accept_strings(self):
        desc = RequestDescriptor(method="GET", path="/me/messages", modifiers={"top": 5, "orderby": ["receivedDateTime desc"]})
        assert desc.modifiers[ModifierKind.TOP] == 5
        assert desc.modifiers[ModifierKind.ORDERBY] == ("receivedDateTime desc",)

    def test_scalar_promoted_for_multi_valued_kind(self):
        desc = RequestDescriptor(method="GET", path="/me/messages", modifiers={"select": "subject"})
        assert desc.modifiers[ModifierKind.SELECT] == ("subject",)

    def test_list_rejected_for_single_valued_kind(self):
        with pytest.raises(ValidationError):
            RequestDescriptor(method="GET", path="/me/messages", modifiers={"top": ["1", "2"]})

    def test_unknown_modifier_kind_rejected(self):
        with pytest.raises(ValidationError):
            RequestDescriptor(method="GET", path="/me/messages", modifiers={"count": "true"})

    def test_headers_from_mapping(self):
        desc = RequestDescriptor(method="GET", path="/me", headers={"ConsistencyLevel": "eventual"})
        assert desc.headers == (("ConsistencyLevel", "eventual"),)

    def test_whitespace_body_is_no_body(self):
        desc = RequestDescriptor(method="POST", path="/me/sendMail", request_body="  \n ")
        assert desc.has_body is False

    def test_descriptor_is_frozen(self):
        desc = RequestDescriptor(method="GET", path="/me")
        with pytest.raises(ValidationError):
            desc.response_variable_name = "other"

    def test_collections_are_read_only(self):
        desc = RequestDescriptor(
            method="GET",
            path="/me/messages",
            segments=[PathSegment(identifier="messages")],
            modifiers={"top": 5},
            headers=[("Prefer", "x")],
        )
        with pytest.raises(TypeError):
            desc.modifiers[ModifierKind.TOP] = 50
        assert isinstance(desc.segments, tuple)
        assert isinstance(desc.headers, tuple)

    def test_serialization_roundtrip(self):
        desc = RequestDescriptor(
            method="PATCH",
            path="/me/events/1",
            segments=[PathSegment(identifier="events", kind="navigation_property", type_name="microsoft.graph.event")],
            custom_query_options=frozenset({"debug"}),
            request_body='{"subject": "x"}',
        )
        desc2 = RequestDescriptor(**desc.model_dump())
        assert desc2 == desc
