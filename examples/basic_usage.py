"""Basic usage examples."""
from iconify_loader import IconifyLoader, LoaderOptions

# --- Example 1: React components with optimization ---
options = IconifyLoader.merge_options(
    LoaderOptions(
        input_dir="examples/icons",
        output_dir="examples/generated-components",
        format="react",
        svg_props={"aria-hidden": "true"},
        verbose=True,
    )
)
result = IconifyLoader.load(options)
print(f"React: {len(result.files)} files, success={result.success}")

# --- Example 2: Custom component and file naming ---
result = IconifyLoader.load(
    LoaderOptions(
        input_dir="examples/icons",
        output_dir="examples/custom-named-components",
        format="react",
        typescript=True,
        generate_index=True,
        component_namer=lambda name: "MyCustom" + "".join(c for c in name if c.isalnum()),
        file_namer=lambda name: "my-" + name.lower(),
    )
)

# --- Example 3: Cleaned SVG strings with a typed index ---
result = IconifyLoader.load(
    LoaderOptions(
        input_dir="examples/icons",
        output_dir="examples/generated-svgs",
        format="svg",
        optimize=True,
        generate_index=True,
        typescript=True,
        svgo_options={"floatPrecision": 3, "plugins": [{"name": "removeXMLNS"}]},
    )
)
for warning in result.warnings:
    print(f"warning: {warning}")

# --- Example 4: JSON metadata catalog ---
result = IconifyLoader.load(
    LoaderOptions(
        input_dir="examples/icons",
        output_dir="examples/generated-metadata",
        format="json",
        generate_index=True,
        verbose=True,
    )
)
if not result.success:
    for error in result.errors:
        print(f"error: {error}")
