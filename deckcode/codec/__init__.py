"""
Deck code codec internals.

Leaf layers (registry, varint framing, grouping) live here. The public
encode/decode pair is in deckcode.codec.transcoder and re-exported from the
top-level package.
"""
