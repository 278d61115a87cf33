#!/usr/bin/env python3
"""
Example: Building scales from patterns and from the catalog.

Shows how the tonic picks sharp or flat spelling, and how named
scales from the catalog expand into notes.

Usage:
    python examples/use_catalog.py
"""

from pathlib import Path

from chuk_mcp_scales import chromatic_scale, find_chromatic_scale, scale
from chuk_mcp_scales.catalog import ScaleCatalog


def main() -> None:
    """Demonstrate scale building."""
    print("CHUK Scales Demo")
    print("=" * 40)
    print()

    # Chromatic scales
    print("Chromatic scales:")
    print(f"  C (sharps):      {' '.join(chromatic_scale('C'))}")
    print(f"  F (key of F):    {' '.join(find_chromatic_scale('F'))}")
    print(f"  G (key of G):    {' '.join(find_chromatic_scale('G'))}")
    print()

    # Raw patterns
    print("Major scale (MMmMMMm):")
    for tonic in ["C", "D", "Bb", "f#"]:
        print(f"  {tonic:>3}: {' '.join(scale(tonic, 'MMmMMMm'))}")
    print()

    # Named scales from the library
    library_path = Path(__file__).parent.parent / "src/chuk_mcp_scales/catalog/library"
    catalog = ScaleCatalog(library_path=library_path)

    print("Named scales on A:")
    for definition in catalog.list_scales():
        result = catalog.build("A", definition.name)
        print(f"  {definition.name:<18} {definition.pattern:<14} {' '.join(result.notes)}")


if __name__ == "__main__":
    main()
