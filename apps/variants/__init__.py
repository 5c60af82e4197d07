"""
Product variant resolution engine.

Maps a shopper's attribute selection (size, color, material, ...) onto a
concrete purchasable variant and builds the cart line for it. Pure business
logic: no models, no views, no I/O.
"""
