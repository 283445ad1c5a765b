"""Tests for renderers."""

import json
import pytest
from dto_generator import DtoGenerator, GeneratorConfig
from dto_generator.models import ClassModel
from dto_generator.renderers import JsonDescriptionRenderer, NamespaceFolderResolver
from dto_generator.types import InputError, RendererInterface


class TestNamespaceFolderResolver:
    """Tests for NamespaceFolderResolver class."""

    def test_without_prefix_map(self):
        """Test that separators become slashes."""
        resolver = NamespaceFolderResolver()

        assert resolver.namespace_to_folder("App\\Data") == "App/Data"
        assert resolver.namespace_to_folder("\\App\\Data\\Dto") == "App/Data/Dto"

    def test_with_prefix_map(self):
        """Test PSR-4-like prefix replacement."""
        resolver = NamespaceFolderResolver({"App\\": "app/"})

        assert resolver.namespace_to_folder("App\\Data") == "app/Data"
        assert resolver.namespace_to_folder("App") == "app"
        assert resolver.namespace_to_folder("Acme\\Data") == "Acme/Data"

    def test_with_nested_prefix(self):
        """Test a prefix with more than one segment."""
        resolver = NamespaceFolderResolver({"Acme\\Models\\": "src/models"})

        assert resolver.namespace_to_folder("Acme\\Models\\Dto") == "src/models/Dto"

    def test_invalid_namespace(self):
        """Test that an invalid namespace is rejected."""
        with pytest.raises(InputError):
            NamespaceFolderResolver().namespace_to_folder("1App")

    def test_class_path(self):
        """Test artifact path of a class model."""
        model = ClassModel(namespace="App\\Data", class_name="UserData", fields=())

        assert NamespaceFolderResolver().class_path(model) == "App/Data/UserData.json"
        assert NamespaceFolderResolver().class_path(model, "php") == "App/Data/UserData.php"


class TestJsonDescriptionRenderer:
    """Tests for JsonDescriptionRenderer class."""

    def setup_method(self):
        """Set up test fixtures."""
        generator = DtoGenerator(GeneratorConfig(getters=True))
        self.classes = generator.generate(json.dumps({
            "id": 1,
            "owner": {"name": "Alice"},
        })).classes
        self.renderer = JsonDescriptionRenderer()

    def test_is_a_renderer(self):
        """Test the renderer contract."""
        assert isinstance(self.renderer, RendererInterface)

    def test_render_one_artifact_per_class(self):
        """Test that every class maps to exactly one artifact, in order."""
        rendered = list(self.renderer.render(self.classes))

        assert [artifact.path for artifact in rendered] == [
            "App/Data/OwnerData.json",
            "App/Data/RootData.json",
        ]

        root = json.loads(rendered[1].content)
        assert root["className"] == "RootData"
        assert root["fields"][1]["type"]["description"] == "OwnerData"
        assert [method["name"] for method in root["methods"]] == ["getId", "getOwner"]

    def test_render_document(self):
        """Test rendering all classes as one JSON list."""
        document = json.loads(self.renderer.render_document(self.classes))

        assert [entry["path"] for entry in document] == [
            "App/Data/OwnerData.json",
            "App/Data/RootData.json",
        ]
        assert document[0]["class"]["fields"][0]["name"] == "name"

    def test_render_nothing(self):
        """Test rendering an empty class list."""
        assert list(self.renderer.render([])) == []
        assert json.loads(self.renderer.render_document([])) == []
