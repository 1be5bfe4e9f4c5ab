"""Unit tests for models package."""

from confluence_rest.models import (
    Body,
    Content,
    ContentResultList,
    NoContent,
    Representation,
    Space,
    SpaceResultList,
    Storage,
    Type,
    Version,
)


PAGE_JSON = {
    "id": "65601",
    "type": "page",
    "status": "current",
    "title": "Release notes",
    "space": {"id": 98305, "key": "DEV", "name": "Development", "type": "global"},
    "body": {
        "storage": {
            "value": "<p>Shipped <strong>1.2</strong></p>",
            "representation": "storage",
        }
    },
    "version": {"number": 3, "when": "2016-01-05T10:00:00.000Z", "minorEdit": False},
    "ancestors": [{"id": "65540", "type": "page", "title": "Home"}],
    "_links": {"webui": "/display/DEV/Release+notes"},
    "_expandable": {"children": ""},
}


class TestEnums:
    """Test cases for Type and Representation."""

    def test_type_str_is_wire_value(self):
        """str(Type) yields the value used in URLs."""
        assert str(Type.PAGE) == "page"
        assert str(Type.BLOGPOST) == "blogpost"

    def test_representation_str_is_wire_value(self):
        """str(Representation) yields the value used in URLs."""
        assert str(Representation.VIEW) == "view"
        assert str(Representation.EXPORT_VIEW) == "export_view"
        assert Representation("storage") is Representation.STORAGE


class TestContent:
    """Test cases for Content mapping."""

    def test_from_dict_parses_nested_objects(self):
        """from_dict builds space, body, version and ancestors."""
        content = Content.from_dict(PAGE_JSON)

        assert content.id == "65601"
        assert content.type == "page"
        assert content.title == "Release notes"
        assert content.space == Space(
            key="DEV", id=98305, name="Development", type="global"
        )
        assert content.storage_value == "<p>Shipped <strong>1.2</strong></p>"
        assert content.version.number == 3
        assert content.version.minor_edit is False
        assert [a.title for a in content.ancestors] == ["Home"]
        assert content.links == {"webui": "/display/DEV/Release+notes"}

    def test_from_dict_numeric_id_becomes_string(self):
        """Numeric ids are normalized to strings."""
        assert Content.from_dict({"id": 123}).id == "123"

    def test_from_dict_minimal(self):
        """Unexpanded fields stay empty."""
        content = Content.from_dict({"id": "1"})

        assert content.space is None
        assert content.body is None
        assert content.storage_value is None
        assert content.ancestors == []

    def test_to_dict_omits_unset_fields(self):
        """to_dict leaves out None values and empty ancestors."""
        content = Content(title="Draft", type="page")

        assert content.to_dict() == {"type": "page", "title": "Draft"}

    def test_new_page_builds_create_payload(self):
        """new_page produces the JSON Confluence expects for creation."""
        content = Content.new_page("DEV", "New page", "<p>Hi</p>", ancestor_id="42")

        assert content.to_dict() == {
            "type": "page",
            "title": "New page",
            "space": {"key": "DEV"},
            "body": {"storage": {"value": "<p>Hi</p>", "representation": "storage"}},
            "ancestors": [{"id": "42"}],
        }

    def test_new_blogpost(self):
        """new_page accepts a blog post type."""
        content = Content.new_page("DEV", "News", "<p/>", content_type=Type.BLOGPOST)

        assert content.type == "blogpost"
        assert content.ancestors == []

    def test_parsed_content_serializes_without_links(self):
        """Links and unknown keys are not sent back to the server."""
        data = Content.from_dict(PAGE_JSON).to_dict()

        assert "_links" not in data
        assert "_expandable" not in data
        assert data["version"] == {
            "number": 3,
            "when": "2016-01-05T10:00:00.000Z",
            "minorEdit": False,
        }


class TestStorage:
    """Test cases for Storage and Body."""

    def test_default_representation_is_storage(self):
        """Storage defaults to the storage representation."""
        assert Storage(value="<p/>").representation == "storage"

    def test_to_dict_accepts_enum_representation(self):
        """An enum representation serializes to its wire value."""
        storage = Storage(value="<p/>", representation=Representation.VIEW)

        assert storage.to_dict() == {"value": "<p/>", "representation": "view"}

    def test_body_round_trip_with_view(self):
        """Body keeps both storage and view when present."""
        body = Body.from_dict({
            "storage": {"value": "<p>a</p>", "representation": "storage"},
            "view": {"value": "<p>a</p>", "representation": "view"},
        })

        assert body.view.representation == "view"
        assert set(body.to_dict()) == {"storage", "view"}


class TestVersion:
    """Test cases for Version."""

    def test_to_dict_only_number(self):
        assert Version(number=2).to_dict() == {"number": 2}


class TestResultLists:
    """Test cases for ContentResultList, SpaceResultList and NoContent."""

    def test_content_result_list_preserves_order(self):
        """Results keep the order of the JSON array."""
        results = ContentResultList.from_dict({
            "results": [{"id": "3"}, {"id": "1"}, {"id": "2"}],
            "start": 0,
            "limit": 25,
            "size": 3,
            "_links": {"next": "/rest/api/content?start=25"},
        })

        assert [c.id for c in results.contents] == ["3", "1", "2"]
        assert results.limit == 25
        assert results.links["next"] == "/rest/api/content?start=25"

    def test_contents_returns_a_copy(self):
        """Mutating the returned list does not touch the wrapper."""
        results = ContentResultList.from_dict({"results": [{"id": "1"}]})

        results.contents.clear()

        assert len(results.results) == 1

    def test_empty_space_result_list(self):
        """An empty or missing results array yields an empty list."""
        assert SpaceResultList.from_dict({"results": []}).spaces == []
        assert SpaceResultList.from_dict({}).spaces == []

    def test_size_defaults_to_result_count(self):
        results = SpaceResultList.from_dict({"results": [{"key": "A"}, {"key": "B"}]})

        assert results.size == 2
        assert [s.key for s in results.spaces] == ["A", "B"]

    def test_no_content(self):
        assert NoContent(status_code=204).status_code == 204
        assert NoContent().status_code is None
