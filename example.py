#!/usr/bin/env python3
"""
Example usage of the DTO Generator.

This script infers class models from a sample API response and prints
the JSON description of every generated class.
"""

import json
import logging
from dto_generator import DtoGenerator, GeneratorConfig
from dto_generator.renderers import JsonDescriptionRenderer, NamespaceFolderResolver


def main():
    """Main example function."""
    print("DTO Generator Example")
    print("=" * 50)

    # Create sample data
    sample_data = {
        "id": 42,
        "name": "Alice Johnson",
        "created_at": "2024-01-01T10:00:00Z",
        "tags": ["admin", "beta"],
        "billing_address": {"street": "1 Main St", "city": "New York"},
        "shipping_address": {"street": "5 Side Ave", "city": "Boston"},
        "orders": [
            {"id": 1, "total": 19.99, "items": [{"sku": "A-1", "qty": 2}]},
            {"id": 2, "total": 5.5, "coupon": "WELCOME", "items": []},
            {"id": 3, "total": "n/a"}
        ],
        "user-name": "ajohnson"
    }

    json_string = json.dumps(sample_data, indent=2)
    print(f"Input JSON size: {len(json_string)} characters\n")

    config = GeneratorConfig.from_options(
        namespace="App\\Data",
        casing="camel",
        all=True,
        dates=True
    )
    generator = DtoGenerator(config, logger=logging.getLogger("example"))

    result = generator.generate(json_string)

    if not result.success:
        print("❌ Generation failed")
        for error in result.errors or []:
            print(f"   Error: {error}")
        print(f"   Suggestion: {result.suggested_action}")
        return

    print(f"✅ Generated {len(result.classes)} classes")
    for model in result.classes:
        fields = ", ".join(f"{spec.identifier}: {spec.type.describe()}" for spec in model.fields)
        print(f"   {model.class_name}({fields})")

    if result.diagnostics:
        print("\nDiagnostics:")
        for diagnostic in result.diagnostics:
            print(f"   [{diagnostic.type.value}] {diagnostic.location}: {diagnostic.message}")

    renderer = JsonDescriptionRenderer(NamespaceFolderResolver({"App\\": "app/"}))
    print("\nRendered artifacts:")
    for rendered in renderer.render(result.classes):
        print(f"\n--- {rendered.path}")
        print(rendered.content)


if __name__ == "__main__":
    main()
