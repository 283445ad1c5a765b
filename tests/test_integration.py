"""Integration tests for the DTO generator."""

import json
import pytest
from dto_generator import DtoGenerator, GeneratorConfig, InputError
from dto_generator.models import JsonInt, from_python
from dto_generator.types import ErrorType, TypeKind


class TestDtoGeneratorIntegration:
    """Integration tests for the complete generation pipeline."""

    def setup_method(self):
        """Set up test fixtures."""
        self.generator = DtoGenerator()

    def test_flat_object(self, sample_user_json):
        """Test a flat object with a scalar array."""
        result = self.generator.generate(sample_user_json)

        assert result.success
        assert len(result.classes) == 1

        root = result.classes[0]
        assert root.class_name == "RootData"
        assert root.namespace == "App\\Data"
        assert [(spec.identifier, spec.type.describe()) for spec in root.fields] == [
            ("id", "int"),
            ("name", "string"),
            ("tags", "array<string>"),
        ]
        assert all(spec.nullable for spec in root.fields)

    def test_root_array_merges_elements(self, sample_list_json):
        """Test that a root array becomes one merged class."""
        result = self.generator.generate(sample_list_json)

        assert result.success
        assert len(result.classes) == 1
        root = result.classes[0]
        assert root.field_names == ("id", "extra")
        assert root.get_field("id").type.kind == TypeKind.INT
        assert root.get_field("extra").type.kind == TypeKind.STRING

    def test_array_field_is_collection(self):
        """Test that an array of objects is referenced as a collection."""
        result = self.generator.generate(json.dumps({"items": [{"id": 1}, {"id": 2, "extra": "x"}]}))

        item, root = result.classes
        assert item.class_name == "ItemData"
        assert item.field_names == ("id", "extra")
        assert root.get_field("items").type.describe() == "collection<ItemData>"

    def test_shared_shape_single_class(self, sample_shared_shape_json):
        """Test that equal key sets produce exactly one nested class."""
        result = self.generator.generate(sample_shared_shape_json)
        classes = {model.class_name: model for model in result.classes}

        xy_classes = [model for model in result.classes if set(model.field_names) == {"x", "y"}]
        assert len(xy_classes) == 1
        assert classes["FirstData"].get_field("a").type.class_ref == xy_classes[0].ref
        assert classes["SecondData"].get_field("b").type.class_ref == xy_classes[0].ref

    def test_root_class_is_last(self, sample_nested_json):
        """Test that classes are emitted after the classes they reference."""
        result = self.generator.generate(sample_nested_json)
        names = [model.class_name for model in result.classes]

        assert names[-1] == "RootData"
        assert names.index("ItemData") < names.index("OrderData")
        assert names.index("OwnerData") < names.index("RootData")

    def test_nested_document(self, sample_nested_json):
        """Test types across a nested document."""
        result = self.generator.generate(sample_nested_json)
        classes = {model.class_name: model for model in result.classes}
        root = classes["RootData"]

        assert root.get_field("created_at").type.kind == TypeKind.STRING
        assert root.get_field("owner").type.describe() == "OwnerData"
        assert root.get_field("flags").type.describe() == "array<bool>"
        assert root.get_field("scores").type.describe() == "array<int|float|null>"
        assert classes["ItemData"].field_names == ("sku", "qty", "note")
        assert result.diagnostics == []

    def test_dates_enabled(self, sample_nested_json):
        """Test date inference when enabled."""
        generator = DtoGenerator(GeneratorConfig(dates=True))
        result = generator.generate(sample_nested_json)

        assert result.classes[-1].get_field("created_at").type.kind == TypeKind.DATE

    def test_determinism(self, sample_nested_json):
        """Test that identical input gives identical output."""
        first = [model.to_dict() for model in self.generator.generate(sample_nested_json).classes]
        second = [model.to_dict() for model in DtoGenerator().generate(sample_nested_json).classes]

        assert json.dumps(first) == json.dumps(second)

    def test_casing_round_trip(self, sample_nested_json):
        """Test that every renamed field keeps its original key."""
        generator = DtoGenerator(GeneratorConfig.from_options(casing="camel"))
        result = generator.generate(sample_nested_json)

        root = result.classes[-1]
        assert root.get_field("createdAt").map_name == "created_at"
        for model in result.classes:
            for spec in model.fields:
                if spec.identifier != spec.raw_key:
                    assert spec.map_name == spec.raw_key
                else:
                    assert spec.map_name is None

    def test_all_accessors(self, sample_user_json):
        """Test getters and setters for every field."""
        generator = DtoGenerator(GeneratorConfig.from_options(all=True))
        root = generator.generate(sample_user_json).classes[0]

        assert [method.name for method in root.methods] == [
            "getId", "setId", "getName", "setName", "getTags", "setTags"
        ]

    def test_namespace_normalized(self, sample_user_json):
        """Test leading separators and dotted namespaces."""
        assert DtoGenerator(GeneratorConfig(namespace="\\Acme\\Dto")).generate(
            sample_user_json).classes[0].namespace == "Acme\\Dto"
        assert DtoGenerator(GeneratorConfig(namespace="acme.dto")).generate(
            sample_user_json).classes[0].namespace == "acme\\dto"

    def test_custom_root_name(self, sample_user_json):
        """Test deriving the root class from another name."""
        generator = DtoGenerator(GeneratorConfig(root_name="users"))

        assert generator.generate(sample_user_json).classes[0].class_name == "UserData"

    def test_invalid_namespace(self, sample_user_json):
        """Test that an invalid namespace produces no classes."""
        generator = DtoGenerator(GeneratorConfig(namespace="1App\\Data"))
        result = generator.generate(sample_user_json)

        assert not result.success
        assert result.classes == []
        assert "namespace" in result.errors[0].lower()
        assert result.suggested_action

    def test_invalid_casing(self, sample_user_json):
        """Test that an unknown casing mode is fatal."""
        generator = DtoGenerator(GeneratorConfig(casing="shouting"))

        with pytest.raises(InputError) as exc_info:
            generator.generate_or_raise(sample_user_json)

        assert exc_info.value.error_type == ErrorType.CASING

    def test_malformed_json(self):
        """Test that malformed JSON produces no classes."""
        result = self.generator.generate('{"id": 1,')

        assert not result.success
        assert result.classes == []
        assert "Invalid JSON" in result.errors[0]

    def test_scalar_root(self):
        """Test that a scalar document is rejected."""
        with pytest.raises(InputError) as exc_info:
            self.generator.generate_or_raise('"text"')

        assert exc_info.value.error_type == ErrorType.STRUCTURE

    def test_diagnostics_reset_between_runs(self):
        """Test that each run reports only its own diagnostics."""
        first = self.generator.generate(json.dumps({"bad-key": 1, "ok": 2}))
        second = self.generator.generate(json.dumps({"ok": 2}))

        assert len(first.diagnostics) == 1
        assert second.diagnostics == []

    def test_ambiguous_field(self):
        """Test that disagreeing element types are recoverable."""
        result = self.generator.generate(json.dumps([{"v": 1}, {"v": "x"}, {"w": True}]))

        assert result.success
        root = result.classes[0]
        assert root.get_field("v").type.kind == TypeKind.UNKNOWN
        assert root.get_field("w").type.kind == TypeKind.BOOL
        assert [d.type for d in result.diagnostics] == [ErrorType.AMBIGUOUS]

    def test_key_with_trailing_newline(self):
        """Test that a key ending in a line break is reported, not emitted."""
        result = self.generator.generate(json.dumps({"id\n": 1, "ok": 2}))

        assert result.success
        assert result.classes[0].field_names == ("ok",)
        assert [d.type for d in result.diagnostics] == [ErrorType.NAMING]

    def test_generate_from_value(self):
        """Test generating from an already parsed value tree."""
        classes = self.generator.generate_from_value(from_python({"id": 1, "owner": {"name": "A"}}))

        assert [model.class_name for model in classes] == ["OwnerData", "RootData"]
        assert self.generator.diagnostics == []

    def test_generate_from_scalar_value(self):
        """Test that a scalar value tree is rejected."""
        with pytest.raises(InputError) as exc_info:
            self.generator.generate_from_value(JsonInt(1))

        assert exc_info.value.error_type == ErrorType.STRUCTURE

    def test_generate_from_value_checks_config(self):
        """Test that the configuration is validated before inference."""
        generator = DtoGenerator(GeneratorConfig(namespace="1App"))

        with pytest.raises(InputError) as exc_info:
            generator.generate_from_value(from_python({"id": 1}))

        assert exc_info.value.error_type == ErrorType.NAMESPACE
