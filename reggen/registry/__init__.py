"""Registry — entry model, parsing and index generation.

The registry layer provides:
- Models: typed tooth and alias entries plus the index document
- Parsing: discriminator sniff, schema check and typed extraction
- Building: reduction of identifier/entry pairs into the index
- Loading: reading an entries directory and writing the index file
"""
