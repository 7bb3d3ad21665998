"""Bundled HSN reference catalog.

A small slice of the HSN schedule covering the chapters the trade desk
works with most. Used when no catalog file is configured, so the service
and its tests have something real to validate against.
"""

SAMPLE_CATALOG: dict[str, str] = {
    # ── Chapter 01: Live animals ─────────────────────────────────
    "01": "Live animals",
    "0101": "Live horses, asses, mules and hinnies",
    "010121": "Horses: pure-bred breeding animals",
    "01012100": "Horses: pure-bred breeding animals",
    "010129": "Horses: other",
    "01012910": "Horses for polo",
    "01012990": "Horses: other",
    # ── Chapter 08: Edible fruit and nuts ────────────────────────
    "08": "Edible fruit and nuts; peel of citrus fruit or melons",
    "0801": "Coconuts, Brazil nuts and cashew nuts, fresh or dried",
    "080131": "Cashew nuts, in shell",
    "08013110": "Cashew nuts in shell: for sowing",
    "08013190": "Cashew nuts in shell: other",
    "080132": "Cashew nuts, shelled",
    "08013210": "Cashew kernels: broken",
    "08013220": "Cashew kernels: whole",
    # ── Chapter 10: Cereals ──────────────────────────────────────
    "10": "Cereals",
    "1006": "Rice",
    "100630": "Semi-milled or wholly milled rice",
    "10063010": "Rice, parboiled",
    "10063020": "Basmati rice",
    "10063090": "Rice: other",
    # ── Chapter 12: Oil seeds ────────────────────────────────────
    "12": "Oil seeds and oleaginous fruits; miscellaneous grains, seeds and fruit",
    "1201": "Soya beans, whether or not broken",
    "120190": "Soya beans: other than seed",
    "12019000": "Soya beans: other than seed",
    "1207": "Other oil seeds and oleaginous fruits",
    "120740": "Sesamum seeds",
    "12074010": "Sesamum seeds: edible grade",
    "12074090": "Sesamum seeds: other",
    # ── Chapter 52: Cotton ───────────────────────────────────────
    "52": "Cotton",
    "5201": "Cotton, not carded or combed",
    "520100": "Cotton, not carded or combed",
    "52010011": "Bengal deshi cotton",
    "52010020": "Cotton, staple length 20.5 mm to 24.5 mm",
}
