"""Tests for schema inferencer."""

import pytest
from dto_generator.data_type_detector import DataTypeDetector
from dto_generator.engines import ClassModelBuilder, NameCasingEngine, ShapeRegistry
from dto_generator.error_handler import ErrorHandler
from dto_generator.models import JsonInt, JsonNull, JsonString, from_python
from dto_generator.processors import SchemaInferencer, ShapeMerger
from dto_generator.types import ErrorType, InputError, TypeKind


class TestSchemaInferencer:
    """Tests for SchemaInferencer class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.inferencer = self._make_inferencer()

    def _make_inferencer(self, detect_dates=False):
        self.error_handler = ErrorHandler()
        self.registry = ShapeRegistry()
        detector = DataTypeDetector(detect_dates=detect_dates)
        casing_engine = NameCasingEngine()
        return SchemaInferencer(
            self.registry,
            ClassModelBuilder(casing_engine=casing_engine, error_handler=self.error_handler),
            "App\\Data",
            merger=ShapeMerger(detector, self.error_handler),
            detector=detector,
            casing_engine=casing_engine,
            error_handler=self.error_handler
        )

    def _classes(self):
        return {model.class_name: model for model in self.registry}

    def test_infer_scalars(self):
        """Test scalar classification."""
        assert self.inferencer.infer(JsonInt(1), "id").kind == TypeKind.INT
        assert self.inferencer.infer(JsonString("x"), "name").kind == TypeKind.STRING
        assert self.inferencer.infer(JsonNull(), "note").kind == TypeKind.UNKNOWN

    def test_infer_dates_when_enabled(self):
        """Test date classification only with date inference enabled."""
        value = JsonString("2024-01-05T10:00:00Z")

        assert self.inferencer.infer(value, "created").kind == TypeKind.STRING

        inferencer = self._make_inferencer(detect_dates=True)
        assert inferencer.infer(value, "created").kind == TypeKind.DATE

    def test_infer_nested_object(self):
        """Test that a nested object becomes a class reference."""
        descriptor = self.inferencer.infer(from_python({"street": "Main"}), "address", "root.address")

        assert descriptor.kind == TypeKind.OBJECT
        assert descriptor.class_ref.name == "AddressData"
        assert descriptor.class_ref.namespace == "App\\Data"
        assert "AddressData" in self._classes()

    def test_infer_scalar_array(self):
        """Test scalar arrays become typed arrays."""
        descriptor = self.inferencer.infer(from_python(["a", 1, None, "b"]), "values")

        assert descriptor.kind == TypeKind.ARRAY
        assert descriptor.element_types == (TypeKind.STRING, TypeKind.INT, TypeKind.UNKNOWN)

    def test_infer_empty_array(self):
        """Test that an empty array is opaque without a diagnostic."""
        descriptor = self.inferencer.infer(from_python([]), "values")

        assert descriptor.is_opaque_array
        assert self.error_handler.diagnostics == []

    def test_infer_array_of_objects(self):
        """Test arrays of objects become collections of one merged class."""
        value = from_python([{"id": 1}, {"id": 2, "extra": "x"}])
        descriptor = self.inferencer.infer(value, "items", "root.items")

        assert descriptor.kind == TypeKind.COLLECTION
        assert descriptor.class_ref.name == "ItemData"
        assert self._classes()["ItemData"].field_names == ("id", "extra")

    def test_infer_array_of_arrays(self):
        """Test that arrays of arrays are opaque with a diagnostic."""
        descriptor = self.inferencer.infer(from_python([[1], [2]]), "matrix", "root.matrix")

        assert descriptor.is_opaque_array
        diagnostics = self.error_handler.diagnostics
        assert diagnostics[0].type == ErrorType.STRUCTURE
        assert diagnostics[0].location == "root.matrix[]"

    def test_infer_objects_mixed_with_scalars(self):
        """Test that objects next to scalars cannot be merged."""
        descriptor = self.inferencer.infer(from_python([{"a": 1}, 2]), "mixed", "root.mixed")

        assert descriptor.is_opaque_array
        assert self.error_handler.diagnostics[0].type == ErrorType.STRUCTURE
        assert len(self.registry) == 0

    def test_invalid_keys_are_skipped(self):
        """Test that keys failing identifier validation are reported."""
        model = self.inferencer.infer_root(from_python({"id": 1, "first-name": "A", "2x": 0}), "Root")

        assert model.field_names == ("id",)
        locations = [diagnostic.location for diagnostic in self.error_handler.diagnostics]
        assert locations == ["root.first-name", "root.2x"]
        assert all(d.type == ErrorType.NAMING for d in self.error_handler.diagnostics)

    def test_key_with_trailing_newline_is_skipped(self):
        """Test that a key ending in a line break does not become a field."""
        model = self.inferencer.infer_root(from_python({"id\n": 1, "ok": 2}), "Root")

        assert model.field_names == ("ok",)
        assert [d.location for d in self.error_handler.diagnostics] == ["root.id\n"]
        assert self.error_handler.diagnostics[0].type == ErrorType.NAMING

    def test_shared_shapes_deduplicated(self):
        """Test that equal key sets resolve to one class."""
        value = from_python({
            "first": {"a": {"x": 1, "y": 2}},
            "second": {"b": {"y": "3", "x": "4"}},
        })
        self.inferencer.infer_root(value, "Root")
        classes = self._classes()

        assert set(classes) == {"AData", "FirstData", "SecondData", "RootData"}
        assert classes["FirstData"].get_field("a").type.class_ref.name == "AData"
        assert classes["SecondData"].get_field("b").type.class_ref.name == "AData"

    def test_dedup_is_casing_insensitive(self):
        """Test that keys differing only in casing share a shape."""
        value = from_python({
            "a": {"user_id": 1},
            "b": {"userId": 2},
        })
        self.inferencer.infer_root(value, "Root")

        assert [model.class_name for model in self.registry] == ["AData", "RootData"]

    def test_root_array(self):
        """Test that a root array yields one merged root class."""
        model = self.inferencer.infer_root(from_python([{"id": 1}, None, {"name": "x"}]), "Root")

        assert model.class_name == "RootData"
        assert model.field_names == ("id", "name")

    def test_root_array_unmergeable(self):
        """Test that a root array of scalars yields an empty root class."""
        model = self.inferencer.infer_root(from_python([1, 2, 3]), "Root")

        assert model.class_name == "RootData"
        assert model.fields == ()
        assert self.error_handler.diagnostics[0].type == ErrorType.STRUCTURE
        assert self.error_handler.diagnostics[0].location == "root[]"

    def test_root_empty_array(self):
        """Test that an empty root array yields an empty root class."""
        model = self.inferencer.infer_root(from_python([]), "Root")

        assert model.fields == ()
        assert self.error_handler.diagnostics == []

    def test_root_scalar(self):
        """Test that a scalar root is fatal."""
        with pytest.raises(InputError):
            self.inferencer.infer_root(JsonInt(1), "Root")

    def test_recursive_shape(self):
        """Test that a shape containing itself is typed unknown."""
        value = from_python({"value": 1, "next": {"value": 2, "next": None}})
        model = self.inferencer.infer_root(value, "Root")

        assert model.get_field("next").type.kind == TypeKind.UNKNOWN
        diagnostics = self.error_handler.diagnostics
        assert len(diagnostics) == 1
        assert diagnostics[0].type == ErrorType.CIRCULAR
        assert diagnostics[0].location == "root.next"
        assert [m.class_name for m in self.registry] == ["RootData"]

    def test_nested_collections(self):
        """Test arrays of objects nested inside arrays of objects."""
        value = from_python({
            "orders": [
                {"id": 1, "lines": [{"sku": "A"}]},
                {"id": 2, "lines": [{"sku": "B", "qty": 3}]},
            ]
        })
        self.inferencer.infer_root(value, "Root")
        classes = self._classes()

        assert [m.class_name for m in self.registry] == ["LineData", "OrderData", "RootData"]
        assert classes["LineData"].field_names == ("sku", "qty")
        assert classes["OrderData"].get_field("lines").type.describe() == "collection<LineData>"
        assert classes["RootData"].get_field("orders").type.describe() == "collection<OrderData>"

    def test_name_collision_gets_suffix(self):
        """Test that distinct shapes found under the same key get distinct names."""
        value = from_python({
            "a": {"item": {"x": 1}},
            "b": {"item": {"y": 1}, "count": 1},
        })
        self.inferencer.infer_root(value, "Root")

        assert {"ItemData", "ItemData2"} <= set(self._classes())
